"""Adaptadores de I/O: API de Passwork (httpx), fzf y portapapeles.

Cada módulo implementa un contrato de `core.interfaces.collaborators`.
"""
