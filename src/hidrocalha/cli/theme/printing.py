"""
Funções que imprimem diretamente no console.
"""

from rich import box
from rich.panel import Panel
from rich.text import Text

from hidrocalha.cli.theme.palette import get_console, get_palette
from hidrocalha.cli.theme.styled import (
    styled_error,
    styled_header,
    styled_info,
    styled_label,
    styled_note,
    styled_success,
    styled_warning,
    styled_warning_box,
)


def format_number(value: float, decimals: int = 2) -> str:
    """Formata número com separador de milhar a partir de 1000."""
    if abs(value) >= 1000:
        return f"{value:,.{decimals}f}"
    return f"{value:.{decimals}f}"


def print_header(text: str, subtitle: str = None) -> None:
    get_console().print(styled_header(text, subtitle))


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime campo "rótulo: valor unidade"."""
    console = get_console()
    console.print(" " * indent, styled_label(label, value, unit))


def print_section(title: str) -> None:
    p = get_palette()
    console = get_console()
    console.print()
    console.print(f"-- {title} --", style=f"bold {p.secondary}")


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))


def print_note(text: str) -> None:
    get_console().print(styled_note(text))


def print_warning_box(lines: list[str], title: str = "AVISO") -> None:
    get_console().print(styled_warning_box(lines, title))


def print_summary_box(title: str, items: list[tuple[str, str, str]]) -> None:
    """
    Imprime quadro de resumo.

    Args:
        title: Título do quadro
        items: Lista de tuplas (rótulo, valor, unidade)
    """
    console = get_console()
    p = get_palette()

    lines = []
    for label, value, unit in items:
        line = Text()
        line.append(f"{label}: ", style=p.label)
        line.append(str(value), style=f"bold {p.accent}")
        if unit:
            line.append(f" {unit}", style=p.unit)
        lines.append(line)

    console.print(Panel(
        Text("\n").join(lines),
        title=title,
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    ))
