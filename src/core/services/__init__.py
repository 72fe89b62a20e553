"""Servicios del Core: orquestación del flujo de búsqueda y copia."""
