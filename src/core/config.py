"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los renderers y el loader lean sus constantes de forma consistente.

Solo se leen variables `SCRIPT_LIST_*` del entorno (no hay `.env`); sin
ellas, los valores por defecto reproducen el comportamiento documentado.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPT_LIST_",
        extra="ignore",
        case_sensitive=False,
    )

    manifest_filename: str = Field(
        default="package.json",
        min_length=1,
        description="Manifest leído cuando no se pasa --path.",
    )
    command_max_width: int = Field(
        default=60,
        ge=8,
        description="Longitud máxima del comando en la tabla (incluye '...').",
    )
    separator_padding: int = Field(
        default=40,
        ge=0,
        description="Ancho extra de la línea separadora sobre la columna de nombres.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de log cuando no se usa --verbose.",
    )
