"""
Módulo de dimensionamento de calhas.

Implementa as duas seções suportadas:
- Retangular: fórmula de Manning com largura inicial tabelada
- Semicircular: Tabela 3 da NBR 10844 (n = 0,011)
"""

# Elementos comuns
from .base import (
    FREEBOARD_MIN_M,
    FREEBOARD_RATIO,
    MIN_GUTTER_SLOPE,
    GutterSection,
    get_manning_n,
    manning_discharge,
    total_height_with_freeboard,
)

# Retangular
from .rectangular import (
    MAX_BISECTION_ITERATIONS,
    initial_gutter_width,
    minimum_flow_depth_mm,
    rectangular_rating_curve,
    size_rectangular_gutter,
)

# Semicircular
from .semicircular import (
    select_semicircular_diameter,
    size_semicircular_gutter,
    slope_key,
)

__all__ = [
    # Base
    "FREEBOARD_MIN_M",
    "FREEBOARD_RATIO",
    "MIN_GUTTER_SLOPE",
    "GutterSection",
    "get_manning_n",
    "manning_discharge",
    "total_height_with_freeboard",
    # Retangular
    "MAX_BISECTION_ITERATIONS",
    "initial_gutter_width",
    "minimum_flow_depth_mm",
    "rectangular_rating_curve",
    "size_rectangular_gutter",
    # Semicircular
    "select_semicircular_diameter",
    "size_semicircular_gutter",
    "slope_key",
]
