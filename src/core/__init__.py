"""Core: dominio, configuración, logging y servicios sin dependencias de terminal."""
