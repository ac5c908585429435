"""
Funções que criam objetos Text/Panel estilizados (não imprimem).
"""

from rich import box
from rich.panel import Panel
from rich.text import Text

from hidrocalha.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Cabeçalho em painel."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_label(label: str, value, unit: str = None) -> Text:
    """Rótulo com valor e unidade opcional."""
    p = get_palette()
    text = Text()
    text.append(f"{label}: ", style=p.label)
    text.append(str(value), style=f"bold {p.number}")
    if unit:
        text.append(f" {unit}", style=p.unit)
    return text


def styled_success(text: str) -> Text:
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def styled_note(text: str) -> Text:
    """Nota informativa com prefixo destacado."""
    p = get_palette()
    result = Text()
    result.append("NOTA: ", style=f"bold {p.note}")
    result.append(text, style=p.note)
    return result


def styled_warning_box(lines: list[str], title: str = "AVISO") -> Panel:
    """Painel de aviso com várias linhas."""
    p = get_palette()
    content = Text()
    for i, line in enumerate(lines):
        if i > 0:
            content.append("\n")
        content.append(line, style=p.warning)

    return Panel(
        content,
        title=f"[bold {p.warning}]{title}[/]",
        title_align="left",
        border_style=p.warning,
        box=box.ROUNDED,
        padding=(0, 1),
    )
