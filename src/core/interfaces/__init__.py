"""Interfaces/abstracciones del Core.

Por qué:
- Define los contratos (Protocol) de la API de Passwork y de los procesos
  externos (fzf, portapapeles).
- El pipeline depende de abstracciones; los adaptadores las implementan.
"""
