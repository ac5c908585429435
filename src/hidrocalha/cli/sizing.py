"""
Comandos CLI para dimensionamento de calhas e condutores.
"""

import json
import warnings
from pathlib import Path
from typing import Annotated, Optional

import typer

from hidrocalha.config import GutterShape, SizingFailure, SizingInput, SizingResult
from hidrocalha.core import (
    MIN_GUTTER_SLOPE,
    NoFeasibleDownspoutWarning,
    SizingEngine,
    get_manning_n,
    rectangular_rating_curve,
)
from hidrocalha.data.reference import ReferenceData, default_reference_data, load_reference_data
from hidrocalha.cli.theme import (
    format_number,
    print_error,
    print_field,
    print_header,
    print_info,
    print_note,
    print_rating_curve_table,
    print_section,
    print_success,
    print_summary_box,
    print_warning_box,
)
from hidrocalha.cli.validators import (
    validate_downspout_count,
    validate_material,
    validate_positive,
    validate_roof_slope,
)

# Criar sub-aplicação
sizing_app = typer.Typer(help="Dimensionamento de calhas e condutores verticais")


SHAPE_LABELS = {
    GutterShape.RECTANGULAR: "Retangular",
    GutterShape.SEMICIRCULAR: "Semicircular",
}


def load_reference(tables: Optional[Path]) -> ReferenceData:
    """Tabelas do sistema ou do arquivo JSON informado (encerra em caso de erro)."""
    if tables is None:
        return default_reference_data()
    try:
        return load_reference_data(tables)
    except (OSError, ValueError) as e:
        print_error(f"Erro ao carregar tabelas: {e}")
        raise typer.Exit(1)


def run_sizing(data: SizingInput, reference: ReferenceData) -> SizingResult:
    """
    Executa o dimensionamento e imprime o relatório.

    Encerra com código 1 se o dimensionamento falhar.
    """
    engine = SizingEngine(reference)

    # O aviso de condutor é exibido no relatório
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NoFeasibleDownspoutWarning)
        outcome = engine.size(data)

    if isinstance(outcome, SizingFailure):
        print_error(outcome.message)
        raise typer.Exit(1)

    print_sizing_result(data, outcome.result)
    return outcome.result


def print_sizing_result(data: SizingInput, result: SizingResult) -> None:
    """Imprime o relatório do dimensionamento."""
    print_header("DIMENSIONAMENTO DE CALHAS E CONDUTORES", "NBR 10844")

    print_section("Dados de entrada")
    print_field("Local", f"{data.city} - {data.state}")
    print_field("Telhado", f"{data.roof_width_m:.2f} x {data.roof_length_m:.2f}", "m")
    print_field("Inclinação", f"{data.roof_slope_pct:.1f}", "%")
    print_field("Altura da cumeeira", f"{result.roof_rise_m:.2f}", "m")
    print_field("Calha", f"{SHAPE_LABELS[data.gutter_shape]} - {data.gutter_material}")
    print_field("n de Manning", f"{result.manning_n:.3f}")

    print_section("Vazão de projeto")
    print_field("Intensidade", f"{result.rainfall_intensity_mmhr:.0f}", "mm/h")
    print_field("Área de contribuição", format_number(result.contribution_area_m2), "m²")
    print_field("Vazão", format_number(result.flow_rate_lmin), "L/min")

    print_section("Calha")
    width_label = "Diâmetro" if data.gutter_shape == GutterShape.SEMICIRCULAR else "Largura"
    print_field(width_label, f"{result.gutter_width_cm:.1f}", "cm")
    print_field("Lâmina d'água", f"{result.water_depth_cm:.1f}", "cm")
    print_field("Altura total", f"{result.total_gutter_height_cm:.1f}", "cm")

    print_section("Condutores verticais")
    print_field("Quantidade", data.downspout_count)
    print_field("Vazão por condutor", format_number(result.flow_rate_lmin / data.downspout_count), "L/min")
    print_field("Diâmetro calculado", f"{result.downspout_required_mm:.1f}", "mm")
    print_field("Regime de entrada", result.downspout_regime.value)

    print_summary_box("RESUMO", [
        (width_label + " da calha", f"{result.gutter_width_cm:.1f}", "cm"),
        ("Altura da calha", f"{result.total_gutter_height_cm:.1f}", "cm"),
        ("Condutores", f"{data.downspout_count} x Ø {result.downspout_diameter_mm:.0f}", "mm"),
    ])

    if result.downspout_warning:
        print_warning_box([
            result.downspout_warning,
            f"Diâmetro necessário: {result.downspout_required_mm:.0f} mm",
        ])
    else:
        print_success("Dimensionamento concluído")


@sizing_app.command("dimensionar")
def sizing_run(
    roof_width: Annotated[float, typer.Argument(help="Largura do telhado em m")],
    roof_length: Annotated[float, typer.Argument(help="Comprimento do telhado em m")],
    roof_slope: Annotated[float, typer.Option("--inclinacao", "-i", help="Inclinação do telhado (%)")] = 30.0,
    state: Annotated[str, typer.Option("--uf", "-u", help="Estado (UF)")] = "SP",
    city: Annotated[str, typer.Option("--cidade", "-c", help="Cidade")] = "São Paulo (Mirante Santana)",
    material: Annotated[str, typer.Option("--material", "-m", help="Material da calha")] = "Chapa Metálica",
    shape: Annotated[GutterShape, typer.Option("--formato", "-f", help="Formato da calha")] = GutterShape.RECTANGULAR,
    downspouts: Annotated[int, typer.Option("--dutos", "-d", help="Nº de condutores verticais")] = 2,
    building_height: Annotated[float, typer.Option("--altura", help="Altura da edificação (m)")] = 3.0,
    tables: Annotated[Optional[Path], typer.Option("--tabelas", help="Arquivo JSON de tabelas")] = None,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Arquivo JSON de saída")] = None,
):
    """
    Dimensiona calha e condutores verticais de um telhado.

    Exemplo:
        hidrocalha calha dimensionar 10 15
        hidrocalha calha dimensionar 8 12 -i 20 -u RS -c "Porto Alegre"
        hidrocalha calha dimensionar 6 10 -f semicircular -m PVC -d 3
    """
    validate_positive(roof_width, "Largura do telhado")
    validate_positive(roof_length, "Comprimento do telhado")
    validate_roof_slope(roof_slope)
    validate_downspout_count(downspouts)

    reference = load_reference(tables)
    data = SizingInput(
        roof_width_m=roof_width,
        roof_length_m=roof_length,
        roof_slope_pct=roof_slope,
        state=state,
        city=city,
        gutter_material=material,
        gutter_shape=shape,
        downspout_count=downspouts,
        building_height_m=building_height,
    )

    result = run_sizing(data, reference)

    if output:
        payload = {
            "input": data.model_dump(mode="json"),
            "result": result.model_dump(mode="json"),
        }
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        print_note(f"Resultado salvo em {output}")


@sizing_app.command("curva")
def sizing_rating_curve(
    width_cm: Annotated[float, typer.Argument(help="Largura da calha retangular em cm")],
    material: Annotated[str, typer.Option("--material", "-m", help="Material da calha")] = "Chapa Metálica",
    max_depth_cm: Annotated[Optional[float], typer.Option("--max-profundidade", help="Lâmina máxima (cm)")] = None,
    step_cm: Annotated[float, typer.Option("--passo", "-p", help="Incremento de lâmina (cm)")] = 1.0,
    tables: Annotated[Optional[Path], typer.Option("--tabelas", help="Arquivo JSON de tabelas")] = None,
):
    """
    Curva-chave (vazão x lâmina) de uma calha retangular com i = 0,5%.

    Exemplo:
        hidrocalha calha curva 30
        hidrocalha calha curva 20 --max-profundidade 10 --passo 0.5
    """
    validate_positive(width_cm, "Largura da calha")
    validate_positive(step_cm, "Incremento de lâmina")
    if max_depth_cm is not None:
        validate_positive(max_depth_cm, "Lâmina máxima")

    reference = load_reference(tables)
    validate_material(reference, material)

    n = get_manning_n(reference, material)
    print_info(f"Material: {material} (n = {n:.3f}), declividade i = {MIN_GUTTER_SLOPE * 100:.1f}%")

    curve = rectangular_rating_curve(
        width_cm / 100,
        n,
        max_depth_m=max_depth_cm / 100 if max_depth_cm is not None else None,
        step_m=step_cm / 100,
    )
    print_rating_curve_table(curve)
