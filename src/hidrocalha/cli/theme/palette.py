"""
Paletas de cores e gerenciamento do tema da CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme


class ThemeName(str, Enum):
    """Temas disponíveis."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de cores de um tema."""
    primary: str      # Títulos e destaques
    secondary: str    # Subtítulos e cabeçalhos de tabela
    accent: str       # Valores principais do resultado

    success: str
    warning: str
    error: str
    info: str
    muted: str
    note: str

    number: str       # Valores numéricos
    unit: str         # Unidades
    label: str        # Rótulos

    border: str       # Bordas e separadores


THEME_DEFAULT = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    accent="#af87af",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    info="#5f87af",
    muted="#808080",
    note="#5fd7d7",
    number="#d7af5f",
    unit="#87af87",
    label="#afafaf",
    border="#5f5f5f",
)

THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    note="#88c0d0",
    number="#d08770",
    unit="#a3be8c",
    label="#d8dee9",
    border="#3b4252",
)

# Tons de cinza com um único acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    note="#5fafff",
    number="#ffffff",
    unit="#909090",
    label="#909090",
    border="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gerenciador do tema ativo (paleta e console Rich)."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Define o tema ativo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recriar console com o novo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Console Rich com o tema aplicado."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(theme=Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "note": p.note,
                "number": p.number,
                "unit": p.unit,
                "label": p.label,
                "title": f"bold {p.primary}",
                "value": f"bold {p.number}",
            }))
        return cls._console


def get_console() -> Console:
    """Console Rich com o tema ativo."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Paleta do tema ativo."""
    return CLITheme.get_palette()
