"""Capa CLI (Typer + Rich): `pwfz` y `pwfz-doctor`."""
