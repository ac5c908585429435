"""
Elementos comuns ao dimensionamento de calhas.

Seção resultante, coeficiente de Manning por material e a fórmula
de Manning para seção retangular:

    Q = (1/n) × S × Rh^(2/3) × √i   [Q: m³/s, S: m², Rh: m, i: m/m]
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from hidrocalha.config import GutterShape
from hidrocalha.core.errors import UnknownMaterialError
from hidrocalha.data.reference import ReferenceData


# Declividade longitudinal mínima da calha (NBR 10844)
MIN_GUTTER_SLOPE = 0.005

# Borda livre: 30% da lâmina ou 2 cm, o que for maior
FREEBOARD_RATIO = 1.3
FREEBOARD_MIN_M = 0.02


@dataclass
class GutterSection:
    """Seção de calha dimensionada (unidades em metros)."""
    shape: GutterShape
    width_m: float            # Largura (ou diâmetro, na semicircular)
    water_depth_m: float      # Lâmina d'água de projeto
    total_height_m: float     # Altura com borda livre
    manning_n: float


def get_manning_n(reference: ReferenceData, material: str) -> float:
    """
    Obtém o coeficiente de Manning de um material de calha.

    Raises:
        UnknownMaterialError: Se o material não está cadastrado
    """
    if material not in reference.materials:
        raise UnknownMaterialError(material)
    return reference.materials[material]


def manning_discharge(
    width_m: float,
    depth_m: float | NDArray[np.floating],
    manning_n: float,
    slope: float = MIN_GUTTER_SLOPE,
) -> float | NDArray[np.floating]:
    """
    Vazão de uma calha retangular pela fórmula de Manning.

    Args:
        width_m: Largura da calha (m)
        depth_m: Lâmina d'água (m), escalar ou array
        manning_n: Coeficiente de rugosidade
        slope: Declividade longitudinal (m/m)

    Returns:
        Vazão em m³/s
    """
    if width_m <= 0:
        raise ValueError("Largura da calha deve ser > 0")
    if manning_n <= 0:
        raise ValueError("Coeficiente de Manning deve ser > 0")

    y = np.asarray(depth_m, dtype=float)
    wetted_area = width_m * y
    wetted_perimeter = width_m + 2 * y
    rh = wetted_area / wetted_perimeter

    Q = (1 / manning_n) * wetted_area * rh ** (2 / 3) * np.sqrt(slope)

    if np.isscalar(depth_m):
        return float(Q)
    return Q


def total_height_with_freeboard(water_depth_m: float) -> float:
    """Altura total da calha retangular: max(1,3 y; y + 0,02)."""
    return max(water_depth_m * FREEBOARD_RATIO, water_depth_m + FREEBOARD_MIN_M)
