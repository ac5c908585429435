"""
Condutores verticais pelo método de Frutuoso Dantas.

Com H a lâmina d'água na calha (mm) e Q a vazão por condutor (L/min):

    H/d > 1/3 (entrada como vertedor):  Q = 0,0039 × d² × H^0,5
    H/d ≤ 1/3 (entrada como orifício):  Q = 0,0116 × d × H^1,5

O diâmetro calculado é arredondado para o menor diâmetro comercial
que o atende.
"""

import math
import warnings
from dataclasses import dataclass
from typing import Optional, Sequence

from hidrocalha.config import DownspoutRegime
from hidrocalha.core.errors import MSG_NO_DOWNSPOUT, NoFeasibleDownspoutWarning


FREE_DISCHARGE_COEF = 0.0039
ORIFICE_DISCHARGE_COEF = 0.0116
REGIME_THRESHOLD = 1 / 3


@dataclass
class DownspoutSizing:
    """Resultado do dimensionamento dos condutores verticais."""
    flow_per_downspout_lmin: float
    required_mm: float                 # Diâmetro calculado
    diameter_mm: float                 # Diâmetro comercial adotado
    regime: DownspoutRegime
    feasible: bool                     # False se o catálogo não atende
    warning: Optional[str] = None


def required_downspout_diameter(
    flow_per_downspout_lmin: float,
    water_depth_mm: float,
) -> tuple[float, DownspoutRegime]:
    """
    Diâmetro necessário do condutor (mm) e o regime de entrada.

    Supõe primeiro o regime de vertedor e verifica H/d > 1/3;
    caso contrário recalcula como orifício.

    Args:
        flow_per_downspout_lmin: Vazão por condutor (L/min)
        water_depth_mm: Lâmina d'água na calha (mm)

    Returns:
        Tupla (diâmetro em mm, regime)
    """
    if water_depth_mm <= 0:
        raise ValueError("Lâmina d'água deve ser > 0")

    H = water_depth_mm
    d_trial = math.sqrt(flow_per_downspout_lmin / (FREE_DISCHARGE_COEF * H ** 0.5))

    if d_trial > 0 and H / d_trial > REGIME_THRESHOLD:
        return d_trial, DownspoutRegime.FREE

    d_calc = flow_per_downspout_lmin / (ORIFICE_DISCHARGE_COEF * H ** 1.5)
    return d_calc, DownspoutRegime.ORIFICE


def select_standard_diameter(
    required_mm: float,
    catalog: Sequence[float],
) -> Optional[float]:
    """Menor diâmetro do catálogo >= required_mm (None se nenhum atende)."""
    for standard in sorted(catalog):
        if standard >= required_mm:
            return standard
    return None


def size_downspouts(
    flow_rate_lmin: float,
    downspout_count: int,
    water_depth_m: float,
    catalog: Sequence[float],
) -> DownspoutSizing:
    """
    Dimensiona os condutores verticais.

    Se o diâmetro calculado excede o maior diâmetro comercial, adota o
    maior diâmetro do catálogo, marca feasible=False e emite
    NoFeasibleDownspoutWarning.

    Args:
        flow_rate_lmin: Vazão de projeto total (L/min)
        downspout_count: Número de condutores (>= 2)
        water_depth_m: Lâmina d'água na calha (m)
        catalog: Diâmetros comerciais (mm)

    Returns:
        DownspoutSizing
    """
    if downspout_count < 1:
        raise ValueError("Número de condutores deve ser >= 1")
    if not catalog:
        raise ValueError("Catálogo de diâmetros está vazio")

    flow_per_downspout = flow_rate_lmin / downspout_count
    required, regime = required_downspout_diameter(flow_per_downspout, water_depth_m * 1000)

    diameter = select_standard_diameter(required, catalog)
    if diameter is not None:
        return DownspoutSizing(
            flow_per_downspout_lmin=flow_per_downspout,
            required_mm=required,
            diameter_mm=diameter,
            regime=regime,
            feasible=True,
        )

    warnings.warn(
        f"Diâmetro calculado {required:.0f} mm > {max(catalog)} mm: {MSG_NO_DOWNSPOUT}",
        NoFeasibleDownspoutWarning,
    )
    return DownspoutSizing(
        flow_per_downspout_lmin=flow_per_downspout,
        required_mm=required,
        diameter_mm=max(catalog),
        regime=regime,
        feasible=False,
        warning=MSG_NO_DOWNSPOUT,
    )
