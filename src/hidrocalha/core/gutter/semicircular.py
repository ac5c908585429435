"""
Calha semicircular pela Tabela 3 da NBR 10844.

A tabela fornece a capacidade (L/min) de calhas de meia-seção por
diâmetro e declividade, válida apenas para n = 0,011. O diâmetro
escolhido é o menor cuja capacidade atende a vazão de projeto; a
lâmina de projeto é meia seção.
"""

from hidrocalha.config import GutterShape
from hidrocalha.core.errors import (
    MSG_NO_SEMICIRCULAR_GUTTER,
    NoFeasibleGutterError,
    UnsupportedMaterialError,
)
from hidrocalha.core.gutter.base import (
    FREEBOARD_RATIO,
    MIN_GUTTER_SLOPE,
    GutterSection,
)
from hidrocalha.data.reference import ReferenceData
from hidrocalha.data.tables import SEMICIRCULAR_TABLE_N


def slope_key(slope: float) -> str:
    """Chave de declividade usada na tabela ("0.005", "0.01", ...)."""
    return str(slope)


def select_semicircular_diameter(
    flow_rate_lmin: float,
    reference: ReferenceData,
    slope: float = MIN_GUTTER_SLOPE,
) -> int:
    """
    Menor diâmetro tabelado cuja capacidade atende a vazão.

    Args:
        flow_rate_lmin: Vazão de projeto (L/min)
        reference: Tabelas de referência
        slope: Declividade longitudinal (m/m)

    Returns:
        Diâmetro nominal em mm

    Raises:
        NoFeasibleGutterError: Se nenhum diâmetro tabelado atende
    """
    key = slope_key(slope)
    for diameter in sorted(reference.semicircular_capacity):
        capacity = reference.semicircular_capacity[diameter].get(key)
        if capacity is not None and capacity >= flow_rate_lmin:
            return diameter

    raise NoFeasibleGutterError(MSG_NO_SEMICIRCULAR_GUTTER)


def size_semicircular_gutter(
    flow_rate_lmin: float,
    manning_n: float,
    reference: ReferenceData,
    slope: float = MIN_GUTTER_SLOPE,
) -> GutterSection:
    """
    Dimensiona calha semicircular para a vazão de projeto.

    Args:
        flow_rate_lmin: Vazão de projeto (L/min)
        manning_n: Coeficiente de rugosidade do material
        reference: Tabelas de referência
        slope: Declividade longitudinal (m/m)

    Returns:
        GutterSection com diâmetro como largura e meia seção como lâmina

    Raises:
        UnsupportedMaterialError: Se n != 0,011
        NoFeasibleGutterError: Se nenhum diâmetro tabelado atende
    """
    if manning_n != SEMICIRCULAR_TABLE_N:
        raise UnsupportedMaterialError(manning_n)

    diameter = select_semicircular_diameter(flow_rate_lmin, reference, slope)
    depth = (diameter / 2) / 1000

    return GutterSection(
        shape=GutterShape.SEMICIRCULAR,
        width_m=diameter / 1000,
        water_depth_m=depth,
        total_height_m=depth * FREEBOARD_RATIO,
        manning_n=manning_n,
    )
