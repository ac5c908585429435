"""
Calha retangular.

A largura inicial vem da Tabela 4.5 de Plínio Tomaz (função do
comprimento do telhado). A lâmina d'água é a menor profundidade,
múltipla de 1 mm, cuja vazão de Manning atende a vazão de projeto.

Como Q(y) é crescente em y para largura fixa, a busca é feita por
bissecção na grade de milímetros, limitada a y = 2 × largura.
"""

import math

import numpy as np

from hidrocalha.config import GutterShape
from hidrocalha.core.errors import MSG_NO_RECTANGULAR_GUTTER, NoFeasibleGutterError
from hidrocalha.core.gutter.base import (
    MIN_GUTTER_SLOPE,
    GutterSection,
    manning_discharge,
    total_height_with_freeboard,
)
from hidrocalha.data.reference import ReferenceData


DEPTH_STEP_MM = 1
# Lâmina máxima admitida, em múltiplos da largura
MAX_DEPTH_TO_WIDTH = 2
MAX_BISECTION_ITERATIONS = 64


def initial_gutter_width(reference: ReferenceData, roof_length_m: float) -> float:
    """
    Largura inicial da calha retangular (m) pelo comprimento do telhado.

    Args:
        reference: Tabelas de referência
        roof_length_m: Comprimento do telhado (m)

    Returns:
        Largura em metros
    """
    for max_length, width in reference.initial_gutter_widths:
        if roof_length_m <= max_length:
            return width
    return reference.default_initial_gutter_width


def _depth_m(depth_mm: int) -> float:
    return depth_mm / 1000


def minimum_flow_depth_mm(
    width_m: float,
    flow_m3s: float,
    manning_n: float,
    slope: float = MIN_GUTTER_SLOPE,
) -> int:
    """
    Menor lâmina (mm inteiros, a partir de 1 mm) com Q_manning >= Q.

    Args:
        width_m: Largura da calha (m)
        flow_m3s: Vazão de projeto (m³/s)
        manning_n: Coeficiente de rugosidade
        slope: Declividade longitudinal (m/m)

    Returns:
        Lâmina em milímetros

    Raises:
        NoFeasibleGutterError: Se nem a lâmina máxima (2 × largura) escoa Q
    """
    low = DEPTH_STEP_MM
    high = int(round(MAX_DEPTH_TO_WIDTH * width_m * 1000))

    def discharge(depth_mm: int) -> float:
        return manning_discharge(width_m, _depth_m(depth_mm), manning_n, slope)

    if discharge(high) < flow_m3s:
        raise NoFeasibleGutterError(MSG_NO_RECTANGULAR_GUTTER.format(
            width_cm=width_m * 100,
            max_depth_cm=high / 10,
        ))
    if discharge(low) >= flow_m3s:
        return low

    # Invariante: Q(low) < Q_projeto <= Q(high)
    for _ in range(MAX_BISECTION_ITERATIONS):
        if high - low <= DEPTH_STEP_MM:
            return high
        mid = (low + high) // 2
        if discharge(mid) >= flow_m3s:
            high = mid
        else:
            low = mid

    raise NoFeasibleGutterError(
        f"Busca da lâmina não convergiu em {MAX_BISECTION_ITERATIONS} iterações"
    )


def size_rectangular_gutter(
    flow_rate_lmin: float,
    roof_length_m: float,
    manning_n: float,
    reference: ReferenceData,
    slope: float = MIN_GUTTER_SLOPE,
) -> GutterSection:
    """
    Dimensiona calha retangular para a vazão de projeto.

    Args:
        flow_rate_lmin: Vazão de projeto (L/min)
        roof_length_m: Comprimento do telhado (m), define a largura
        manning_n: Coeficiente de rugosidade do material
        reference: Tabelas de referência
        slope: Declividade longitudinal (m/m)

    Returns:
        GutterSection com largura, lâmina e altura total
    """
    width = initial_gutter_width(reference, roof_length_m)
    flow_m3s = flow_rate_lmin / 60000

    depth = _depth_m(minimum_flow_depth_mm(width, flow_m3s, manning_n, slope))

    return GutterSection(
        shape=GutterShape.RECTANGULAR,
        width_m=width,
        water_depth_m=depth,
        total_height_m=total_height_with_freeboard(depth),
        manning_n=manning_n,
    )


def rectangular_rating_curve(
    width_m: float,
    manning_n: float,
    max_depth_m: float | None = None,
    step_m: float = 0.005,
    slope: float = MIN_GUTTER_SLOPE,
) -> dict:
    """
    Curva-chave (vazão × lâmina) de uma calha retangular.

    Args:
        width_m: Largura da calha (m)
        manning_n: Coeficiente de rugosidade
        max_depth_m: Lâmina máxima (default: igual à largura)
        step_m: Incremento de lâmina (m)
        slope: Declividade longitudinal (m/m)

    Returns:
        Dicionário com depths_m, flows_m3s e flows_lmin (arrays)
    """
    if step_m <= 0:
        raise ValueError("Incremento de lâmina deve ser > 0")

    if max_depth_m is None:
        max_depth_m = width_m

    n_steps = max(1, math.floor(round(max_depth_m / step_m, 9)))
    depths = np.arange(1, n_steps + 1) * step_m
    flows = manning_discharge(width_m, depths, manning_n, slope)

    return {
        "width_m": width_m,
        "manning_n": manning_n,
        "slope": slope,
        "depths_m": depths,
        "flows_m3s": flows,
        "flows_lmin": flows * 60000,
    }
