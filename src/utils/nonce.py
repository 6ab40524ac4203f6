"""Geração de strings aleatórias para nonces e nomes temporários."""

from __future__ import annotations

import secrets
import string

ALPHANUMERIC = string.ascii_letters + string.digits


def generate_nonce(length: int = 32, alphabet: str = ALPHANUMERIC) -> str:
    """Gera nonce aleatório com fonte criptográfica.

    Args:
        length: Tamanho da string (> 0)
        alphabet: Caracteres permitidos

    Raises:
        ValueError: Se length <= 0 ou alphabet vazio
    """
    if length <= 0:
        raise ValueError("length deve ser > 0")
    if not alphabet:
        raise ValueError("alphabet não pode ser vazio")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_digits(length: int) -> str:
    """Gera sequência de dígitos decimais (zero à esquerda permitido)."""
    return generate_nonce(length, string.digits)
