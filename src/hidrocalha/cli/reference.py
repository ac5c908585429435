"""
Comandos CLI para consulta das tabelas de referência.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from hidrocalha.data.tables import SEMICIRCULAR_TABLE_N
from hidrocalha.cli.sizing import load_reference
from hidrocalha.cli.theme import (
    print_cities_table,
    print_materials_table,
    print_note,
    print_states_table,
)
from hidrocalha.cli.validators import validate_state

# Criar sub-aplicação
reference_app = typer.Typer(help="Consulta de tabelas de referência")

TablesOption = Annotated[Optional[Path], typer.Option("--tabelas", help="Arquivo JSON de tabelas")]


@reference_app.command("estados")
def reference_states(tables: TablesOption = None):
    """Lista as UFs com intensidade pluviométrica tabelada."""
    reference = load_reference(tables)
    print_states_table(reference.rainfall_intensity)


@reference_app.command("cidades")
def reference_cities(
    state: Annotated[str, typer.Argument(help="Estado (UF)")],
    tables: TablesOption = None,
):
    """
    Lista as cidades de uma UF e suas intensidades (mm/h).

    Exemplo:
        hidrocalha tabelas cidades RJ
    """
    reference = load_reference(tables)
    state = state.upper()
    validate_state(reference, state)
    print_cities_table(state, reference.rainfall_intensity[state])


@reference_app.command("materiais")
def reference_materials(tables: TablesOption = None):
    """Lista os materiais de calha e o coeficiente de Manning."""
    reference = load_reference(tables)
    print_materials_table(reference.materials, SEMICIRCULAR_TABLE_N)
    print_note("Calhas semicirculares usam a Tabela 3 da NBR 10844, válida só para n = 0,011.")
