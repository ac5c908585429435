"""
Funções para criar e imprimir tabelas Rich.
"""

from typing import Mapping

from rich import box
from rich.table import Table

from hidrocalha.cli.theme.palette import get_console, get_palette


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nome, justify), ...]
) -> Table:
    """Cria tabela estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_states_table(rainfall: Mapping[str, Mapping[str, float]]) -> None:
    """Imprime UFs com número de cidades e faixa de intensidades."""
    table = create_results_table(
        "Intensidades pluviométricas por UF",
        [("UF", "left"), ("Cidades", "right"), ("I mín (mm/h)", "right"), ("I máx (mm/h)", "right")],
    )

    for state in sorted(rainfall):
        values = list(rainfall[state].values())
        table.add_row(state, str(len(values)), f"{min(values):.0f}", f"{max(values):.0f}")

    get_console().print(table)


def print_cities_table(state: str, cities: Mapping[str, float]) -> None:
    """Imprime as cidades de uma UF com a intensidade tabelada."""
    p = get_palette()
    table = create_results_table(f"Cidades - {state}")
    table.add_column("Cidade", justify="left")
    table.add_column("I (mm/h)", justify="right", style=p.number)

    for city in sorted(cities):
        table.add_row(city, f"{cities[city]:.0f}")

    get_console().print(table)


def print_materials_table(materials: Mapping[str, float], semicircular_n: float) -> None:
    """Imprime materiais de calha, n de Manning e se admitem seção semicircular."""
    p = get_palette()
    table = create_results_table("Materiais de calha")
    table.add_column("Material", justify="left")
    table.add_column("n", justify="right", style=p.number)
    table.add_column("Semicircular", justify="center")

    for material, n in sorted(materials.items(), key=lambda item: (item[1], item[0])):
        table.add_row(material, f"{n:.3f}", "sim" if n == semicircular_n else "não")

    get_console().print(table)


def print_rating_curve_table(curve: dict) -> None:
    """Imprime a curva-chave de uma calha retangular."""
    p = get_palette()
    table = create_results_table(
        f"Curva-chave - calha {curve['width_m'] * 100:.0f} cm, n = {curve['manning_n']:.3f}"
    )
    table.add_column("Lâmina (cm)", justify="right")
    table.add_column("Q (m³/s)", justify="right", style=p.number)
    table.add_column("Q (L/min)", justify="right", style=f"bold {p.accent}")

    for depth, q_m3s, q_lmin in zip(curve["depths_m"], curve["flows_m3s"], curve["flows_lmin"]):
        table.add_row(f"{depth * 100:.1f}", f"{q_m3s:.5f}", f"{q_lmin:,.1f}")

    get_console().print(table)
