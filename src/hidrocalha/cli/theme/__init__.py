"""
Sistema de temas da CLI do HidroCalha.

Organização:
- palette: paletas de cores e tema ativo (CLITheme, ColorPalette)
- styled: funções que retornam objetos Text/Panel estilizados
- printing: funções que imprimem diretamente no console
- tables: tabelas Rich de dados de referência e resultados
"""

from hidrocalha.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from hidrocalha.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_note,
    styled_warning_box,
)

from hidrocalha.cli.theme.printing import (
    format_number,
    print_header,
    print_field,
    print_section,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_note,
    print_warning_box,
    print_summary_box,
)

from hidrocalha.cli.theme.tables import (
    create_results_table,
    print_states_table,
    print_cities_table,
    print_materials_table,
    print_rating_curve_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_note",
    "styled_warning_box",
    # printing
    "format_number",
    "print_header",
    "print_field",
    "print_section",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_note",
    "print_warning_box",
    "print_summary_box",
    # tables
    "create_results_table",
    "print_states_table",
    "print_cities_table",
    "print_materials_table",
    "print_rating_curve_table",
]
