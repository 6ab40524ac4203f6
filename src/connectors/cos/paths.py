"""Helpers de caminho de objeto e nomes temporários."""

from __future__ import annotations

import re
from datetime import datetime

from utils.nonce import generate_digits

INVALID_PATH_CHARS = '<>:"|?*\\'

_PREFIX_SANITIZE_RE = re.compile(r"[^A-Za-z0-9_-]")
_MAX_PREFIX_LEN = 50


def validate_path(path: str) -> None:
    """Raises ValueError se o caminho for vazio ou tiver caractere proibido."""
    if not path:
        raise ValueError("path cannot be empty")
    for char in path:
        if char in INVALID_PATH_CHARS:
            raise ValueError(f"path contains invalid character: '{char}'")


def generate_temp_file_name(prefix: str, now: datetime | None = None) -> str:
    """<prefix>_<YYYYmmdd>_<HHMMSS>_<6 dígitos>.

    O prefixo é reduzido a [A-Za-z0-9_-] e no máximo 50 caracteres.
    """
    clean = _PREFIX_SANITIZE_RE.sub("_", prefix or "")[:_MAX_PREFIX_LEN] or "tmp"
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{clean}_{stamp}_{generate_digits(6)}"
