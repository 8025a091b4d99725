"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar el flujo del comando con detalles visuales.
- Cada formato de salida es una función pura de (entradas, flags, consola),
  lo que permite testearlos con una consola en memoria.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.cells import cell_len, set_cell_size
from rich.console import Console
from rich.text import Text

from adapters.json_exporter import scripts_to_json
from core.domain.models import ManifestMeta, ScriptEntry
from core.domain.output_format import OutputFormat
from core.errors import WriteError


ELLIPSIS = "..."
INDENT = "   "
COLUMN_GAP = "  "
NAME_HEADER = "Script"
COMMAND_HEADER = "Command"


class OutputConsole(Console):
    """Consola de stdout que deja propagar `BrokenPipeError`.

    Rich, por defecto, silencia stdout y sale con código 1; aquí el error sube
    hasta `render` y se presenta como `WriteError`.
    """

    def on_broken_pipe(self) -> None:
        self.quiet = True
        raise


@dataclass(frozen=True)
class TableLayout:
    """Constantes de la tabla; se aplican igual a todas las filas de un render."""

    command_max_width: int = 60
    separator_padding: int = 40


def truncate_command(command: str, max_width: int) -> str:
    """Corta `command` a `max_width` celdas de terminal, terminando en '...'."""

    if cell_len(command) <= max_width:
        return command
    return set_cell_size(command, max(max_width - len(ELLIPSIS), 0)) + ELLIPSIS


def pad_cells(text: str, width: int) -> str:
    """Rellena `text` con espacios hasta ocupar `width` celdas."""

    return text + " " * max(width - cell_len(text), 0)


def _emit(console: Console, text: Text | str = "") -> None:
    if isinstance(text, str):
        text = Text(text)
    console.print(text, soft_wrap=True)


def _write_raw(console: Console, text: str, *, end: str = "\n") -> None:
    # Texto del manifest tal cual: Rich expandiría tabs y quitaría caracteres de control.
    try:
        console.file.write(text + end)
    except BrokenPipeError:
        console.quiet = True
        raise


def render_table(
    console: Console,
    entries: Sequence[ScriptEntry],
    *,
    names_only: bool,
    meta: ManifestMeta,
    layout: TableLayout | None = None,
) -> None:
    """Tabla de dos columnas con cabecera del paquete y resumen final."""

    if names_only:
        for entry in entries:
            _write_raw(console, entry.name)
        return

    layout = layout or TableLayout()
    width = max([cell_len(NAME_HEADER), *(cell_len(entry.name) for entry in entries)])

    _emit(console)
    _emit(console, Text.assemble(INDENT, (meta.title, "bold green")))
    if meta.description:
        _emit(console, Text.assemble(INDENT, (meta.description, "dim")))
    _emit(console)

    _emit(console, Text.assemble(INDENT, (pad_cells(NAME_HEADER, width), "bold"), COLUMN_GAP, (COMMAND_HEADER, "bold")))
    _emit(console, INDENT + pad_cells("-" * len(NAME_HEADER), width) + COLUMN_GAP + "-" * len(COMMAND_HEADER))
    _emit(console, Text.assemble(INDENT, ("─" * (width + layout.separator_padding), "dim")))

    for entry in entries:
        command = truncate_command(entry.command, layout.command_max_width)
        padding = " " * (width - cell_len(entry.name)) + COLUMN_GAP
        console.print(Text.assemble(INDENT, (entry.name, "grey50")), end="", soft_wrap=True)
        _write_raw(console, padding + command)

    count = len(entries)
    _emit(console)
    _emit(console, f"{INDENT}Found {count} script{'' if count == 1 else 's'}")


def render_list(console: Console, entries: Sequence[ScriptEntry], *, names_only: bool) -> None:
    """Una línea por script: `nombre: comando` (o solo el nombre)."""

    for entry in entries:
        _write_raw(console, entry.name if names_only else f"{entry.name}: {entry.command}")


def render_json(console: Console, entries: Sequence[ScriptEntry], *, names_only: bool) -> None:
    """JSON indentado en el orden ya establecido por el selector."""

    _write_raw(console, scripts_to_json(entries, names_only=names_only))


def render(
    output_format: OutputFormat,
    entries: Sequence[ScriptEntry],
    *,
    names_only: bool,
    meta: ManifestMeta,
    console: Console,
    layout: TableLayout | None = None,
) -> None:
    """Despacha al renderer del formato pedido.

    Un fallo de escritura en la consola (p.ej. pipe cerrado) se convierte en
    `WriteError`.
    """

    try:
        if output_format is OutputFormat.TABLE:
            render_table(console, entries, names_only=names_only, meta=meta, layout=layout)
        elif output_format is OutputFormat.LIST:
            render_list(console, entries, names_only=names_only)
        else:
            render_json(console, entries, names_only=names_only)
        console.file.flush()
    except OSError as exc:
        raise WriteError(exc) from exc


def print_no_scripts(console: Console, *, manifest_name: str) -> None:
    _emit(console, Text(f"⚠️  No scripts found in {manifest_name}", style="yellow"))


def print_error(console: Console, message: str) -> None:
    _emit(console, Text.assemble(("Error:", "bold red"), " ", message))
