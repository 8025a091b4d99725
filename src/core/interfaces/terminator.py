"""Contrato para terminar el proceso.

Por qué Protocol:
- El manifest inexistente corta el proceso directamente (no es un error que
  la CLI pueda recuperar), pero los tests necesitan observar esa decisión
  sin terminar el intérprete.
- `sys.exit` cumple el contrato; los tests inyectan un sustituto.
"""

from __future__ import annotations

from typing import NoReturn, Protocol, runtime_checkable


@runtime_checkable
class Terminator(Protocol):
    """Callable que termina el proceso con un código de salida."""

    def __call__(self, status: int) -> NoReturn:
        ...
