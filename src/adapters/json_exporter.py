"""Exportación JSON del listado de scripts.

Por qué JSON:
- Interoperabilidad con otras herramientas (jq, pipelines de CI).
- El orden de claves es el de la secuencia ya ordenada: no se reordena aquí.
"""

from __future__ import annotations

import json
from typing import Sequence

from core.domain.models import ScriptEntry
from core.errors import SerializeError


def scripts_to_json(entries: Sequence[ScriptEntry], *, names_only: bool = False) -> str:
    """Serializa las entradas a JSON UTF-8 indentado.

    - Por defecto: objeto `{nombre: comando}`.
    - `names_only`: array de nombres.
    """

    payload: object
    if names_only:
        payload = [entry.name for entry in entries]
    else:
        payload = {entry.name: entry.command for entry in entries}

    try:
        return json.dumps(payload, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise SerializeError(f"Failed to encode scripts as JSON: {exc}") from exc
