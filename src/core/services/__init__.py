"""Servicios del Core: lógica pura sobre los modelos del dominio."""
