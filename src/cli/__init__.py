"""Capa CLI (Typer + Rich).

Por qué separada del Core:
- Aquí viven los detalles de terminal (opciones, colores, códigos de salida).
- El Core y los adaptadores no imprimen nada por stdout.
"""

__version__ = "0.1.0"
