"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (JSON del manifest) y documentación
  autocontenida (Field) sin acoplar el Core a librerías de I/O.
- Los modelos son inmutables (`frozen`): cada etapa del pipeline deriva un
  valor nuevo en lugar de modificar el anterior.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.output_format import OutputFormat


DEFAULT_MANIFEST_PATH = Path("package.json")


class Configuration(BaseModel):
    """Opciones de una invocación, construidas una sola vez desde la CLI."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(
        default=DEFAULT_MANIFEST_PATH,
        description="Ruta al manifest (por defecto ./package.json).",
    )
    names_only: bool = Field(
        default=False,
        description="Mostrar solo los nombres de los scripts.",
    )
    filter: str | None = Field(
        default=None,
        description="Patrón (subcadena, sin distinguir mayúsculas) para filtrar nombres.",
    )
    format: OutputFormat = Field(
        default=OutputFormat.TABLE,
        description="Formato de salida.",
    )
    verbose: bool = Field(
        default=False,
        description="Activa logs de depuración en stderr.",
    )


class Manifest(BaseModel):
    """Representación deserializada del fichero JSON de entrada.

    Reglas de tolerancia:
    - `name`/`description` ausentes, nulos, vacíos o de otro tipo -> None.
    - `scripts` ausente o nulo -> mapping vacío.
    - Cualquier otro campo del JSON se ignora.
    - `scripts` con forma incorrecta (no objeto, valores no string, nombre
      vacío) sí es un error: no hay forma razonable de listarlo.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = Field(
        default=None,
        description="Nombre del paquete, si el manifest lo declara.",
    )
    description: str | None = Field(
        default=None,
        description="Descripción del paquete, si el manifest la declara.",
    )
    scripts: dict[str, str] = Field(
        default_factory=dict,
        description="Mapping nombre de script -> línea de comando.",
    )

    @field_validator("name", "description", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @field_validator("scripts", mode="before")
    @classmethod
    def _null_scripts(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("scripts")
    @classmethod
    def _non_empty_names(cls, value: dict[str, str]) -> dict[str, str]:
        if any(not name for name in value):
            raise ValueError("script names must be non-empty strings")
        return value


class ScriptEntry(BaseModel):
    """Un par (nombre, comando) extraído del manifest."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    command: str


class ManifestMeta(BaseModel):
    """Datos de cabecera para el render en tabla."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str | None = None

    @classmethod
    def from_manifest(cls, manifest: Manifest, *, cwd: Path) -> "ManifestMeta":
        """Usa el `name` del manifest o, en su defecto, el nombre del directorio."""

        title = manifest.name or cwd.name or "unknown"
        return cls(title=title, description=manifest.description)
