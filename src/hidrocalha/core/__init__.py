"""Módulos de cálculo do dimensionamento de calhas e condutores."""

from hidrocalha.core.hydrology import (
    get_rainfall_intensity,
    roof_rise,
    contribution_area,
    design_flow_rate,
)

from hidrocalha.core.gutter import (
    MIN_GUTTER_SLOPE,
    GutterSection,
    get_manning_n,
    manning_discharge,
    initial_gutter_width,
    minimum_flow_depth_mm,
    size_rectangular_gutter,
    rectangular_rating_curve,
    select_semicircular_diameter,
    size_semicircular_gutter,
)

from hidrocalha.core.downspout import (
    DownspoutSizing,
    required_downspout_diameter,
    select_standard_diameter,
    size_downspouts,
)

from hidrocalha.core.errors import (
    SizingError,
    RainfallLookupError,
    UnknownMaterialError,
    UnsupportedMaterialError,
    NoFeasibleGutterError,
    NoFeasibleDownspoutWarning,
)

from hidrocalha.core.sizing import (
    SizingEngine,
    size_gutter_system,
    calculate_gutter_and_downspout,
)

__all__ = [
    # Hidrologia
    "get_rainfall_intensity",
    "roof_rise",
    "contribution_area",
    "design_flow_rate",
    # Calhas
    "MIN_GUTTER_SLOPE",
    "GutterSection",
    "get_manning_n",
    "manning_discharge",
    "initial_gutter_width",
    "minimum_flow_depth_mm",
    "size_rectangular_gutter",
    "rectangular_rating_curve",
    "select_semicircular_diameter",
    "size_semicircular_gutter",
    # Condutores
    "DownspoutSizing",
    "required_downspout_diameter",
    "select_standard_diameter",
    "size_downspouts",
    # Erros
    "SizingError",
    "RainfallLookupError",
    "UnknownMaterialError",
    "UnsupportedMaterialError",
    "NoFeasibleGutterError",
    "NoFeasibleDownspoutWarning",
    # Motor
    "SizingEngine",
    "size_gutter_system",
    "calculate_gutter_and_downspout",
]
