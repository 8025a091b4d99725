"""Carga del manifest JSON (package.json o equivalente).

Flujo:
- Fichero inexistente -> aviso formateado en stderr y salida directa (1).
- Fichero ilegible -> `ReadError`.
- JSON inválido o con forma incorrecta -> `ParseError`.

El directorio de trabajo y la forma de terminar el proceso llegan como
parámetros para que los tests puedan sustituirlos.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from core.domain.models import Manifest
from core.errors import ParseError, ReadError
from core.interfaces.terminator import Terminator
from core.logging import get_logger

logger = get_logger(__name__)


def resolve_manifest_path(path: Path, *, cwd: Path) -> Path:
    """Rutas relativas se interpretan respecto a `cwd`."""

    return path if path.is_absolute() else cwd / path


def print_missing_manifest(console: Console, *, path: Path, cwd: Path) -> None:
    """Bloque de diagnóstico para un manifest inexistente."""

    console.print()
    console.print(Text.assemble("   ", (cwd.name or "unknown", "bold red")))
    console.print()
    console.print(Text(f"   No {path.name} file found:"))
    console.print(Text(f"     {cwd}"), soft_wrap=True)
    console.print()


def load_manifest(
    path: Path,
    *,
    cwd: Path,
    console: Console,
    terminate: Terminator = sys.exit,
) -> Manifest:
    """Lee y valida el manifest en `path`.

    `console` debe apuntar a stderr: solo se usa para el aviso de fichero
    inexistente, tras el cual se llama a `terminate(1)`.
    """

    resolved = resolve_manifest_path(path, cwd=cwd)
    logger.debug("Reading manifest %s", resolved)

    try:
        raw = resolved.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Manifest %s does not exist", resolved)
        print_missing_manifest(console, path=resolved, cwd=cwd)
        terminate(1)
        raise RuntimeError("terminator returned instead of ending the process")
    except UnicodeDecodeError as exc:
        raise ParseError(resolved, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ReadError(resolved, exc) from exc

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ParseError(resolved, str(exc)) from exc

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as exc:
        raise ParseError(resolved, _describe_validation_error(exc)) from exc

    logger.debug("Manifest %s declares %d scripts", resolved, len(manifest.scripts))
    return manifest


def _reject_constant(token: str) -> None:
    # NaN, Infinity y -Infinity no son JSON válido.
    raise ValueError(f"invalid JSON constant {token!r}")


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
