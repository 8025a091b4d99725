"""Adaptadores de infraestructura (sistema de ficheros, serialización JSON)."""
