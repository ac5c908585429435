"""
Assistente interativo de dimensionamento.

Coleta os dados do telhado com questionary, na mesma ordem do
formulário: dimensões, local (UF e depois cidade), calha e condutores.
"""

from typing import Optional

import questionary
import typer
from questionary import Style

from hidrocalha.config import GutterShape, SizingInput
from hidrocalha.data.reference import ReferenceData
from hidrocalha.cli.sizing import SHAPE_LABELS, run_sizing
from hidrocalha.cli.theme import print_header
from hidrocalha.cli.validators import (
    parse_downspout_count,
    parse_non_negative_float,
    parse_positive_float,
)

WIZARD_STYLE = Style([
    ('qmark', 'fg:cyan bold'),
    ('question', 'bold'),
    ('answer', 'fg:cyan'),
    ('pointer', 'fg:cyan bold'),
    ('highlighted', 'fg:cyan bold'),
    ('selected', 'fg:green'),
])


def _ask(question: questionary.Question) -> str:
    """Resposta do usuário; encerra se cancelado (Ctrl+C / Esc)."""
    answer = question.ask()
    if answer is None:
        raise typer.Exit()
    return answer


def _to_float(text: str) -> float:
    return float(text.replace(",", "."))


def collect_input(reference: ReferenceData, defaults: Optional[SizingInput] = None) -> SizingInput:
    """
    Pergunta os dados do dimensionamento.

    Args:
        reference: Tabelas de onde saem UFs, cidades e materiais
        defaults: Valores sugeridos (default: exemplo padrão)

    Returns:
        SizingInput preenchido
    """
    d = defaults or SizingInput()

    width = _ask(questionary.text(
        "Largura do telhado (m):", default=str(d.roof_width_m),
        validate=parse_positive_float, style=WIZARD_STYLE,
    ))
    length = _ask(questionary.text(
        "Comprimento do telhado (m):", default=str(d.roof_length_m),
        validate=parse_positive_float, style=WIZARD_STYLE,
    ))
    slope = _ask(questionary.text(
        "Inclinação do telhado (%):", default=str(d.roof_slope_pct),
        validate=parse_non_negative_float, style=WIZARD_STYLE,
    ))

    states = reference.states
    state = _ask(questionary.select(
        "Estado (UF):", choices=states,
        default=d.state if d.state in states else None, style=WIZARD_STYLE,
    ))
    cities = reference.cities(state)
    city = _ask(questionary.select(
        "Cidade:", choices=cities,
        default=d.city if d.city in cities else None, style=WIZARD_STYLE,
    ))

    materials = sorted(reference.materials)
    material = _ask(questionary.select(
        "Material da calha:", choices=materials,
        default=d.gutter_material if d.gutter_material in materials else None,
        style=WIZARD_STYLE,
    ))
    shape = _ask(questionary.select(
        "Formato da calha:",
        choices=[questionary.Choice(label, value=shape.value) for shape, label in SHAPE_LABELS.items()],
        default=d.gutter_shape.value,
        style=WIZARD_STYLE,
    ))

    downspouts = _ask(questionary.text(
        "Nº de condutores verticais:", default=str(d.downspout_count),
        validate=parse_downspout_count, style=WIZARD_STYLE,
    ))

    return SizingInput(
        roof_width_m=_to_float(width),
        roof_length_m=_to_float(length),
        roof_slope_pct=_to_float(slope),
        state=state,
        city=city,
        gutter_material=material,
        gutter_shape=GutterShape(shape),
        downspout_count=int(downspouts),
        building_height_m=d.building_height_m,
    )


def wizard_main(reference: ReferenceData) -> None:
    """Executa o assistente e imprime o relatório."""
    print_header("HIDROCALHA - ASSISTENTE", "Dimensionamento de calhas pela NBR 10844")
    data = collect_input(reference)
    run_sizing(data, reference)
