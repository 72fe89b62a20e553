"""Core de pwfz.

Por qué:
- Configuración, dominio, formato y orquestación sin I/O directo.
- No conoce httpx, subprocess ni Rich: eso vive en `adapters` y `cli`.
"""
