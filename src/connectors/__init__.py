"""Conectores para APIs de fornecedores de nuvem.

Cada subpacote é independente: monta a requisição, autentica no esquema do
fornecedor, faz uma chamada HTTP e converte a resposta em resultado tipado
ou em erro do fornecedor.
"""
