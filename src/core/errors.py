"""Errores del proyecto.

Por qué una jerarquía propia:
- Los adaptadores traducen excepciones de librerías (OSError, JSON, Pydantic)
  a un vocabulario estable que la CLI sabe presentar.
- La CLI solo necesita capturar `ScriptListError` para terminar con un mensaje
  legible y código de salida 1.

El manifest inexistente NO está aquí: es una salida directa del proceso
(ver `adapters.manifest_loader`).
"""

from __future__ import annotations

from pathlib import Path


class ScriptListError(Exception):
    """Base de todos los fallos que la CLI presenta al usuario."""


class ReadError(ScriptListError):
    """The manifest exists but could not be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read {path}: {cause}")


class ParseError(ScriptListError):
    """The manifest is not valid JSON or does not have the expected shape."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse {path} as JSON: {detail}")


class SerializeError(ScriptListError):
    """The JSON renderer could not encode the listing."""


class WriteError(ScriptListError):
    """Writing to standard output failed (e.g. closed pipe)."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"Failed to write output: {cause}")
