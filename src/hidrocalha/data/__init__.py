"""
Módulo de dados e tabelas de referência.

Provê as tabelas do sistema (NBR 10844) e o contêiner imutável
ReferenceData injetado no motor de dimensionamento.
"""

from hidrocalha.data.reference import (
    ReferenceData,
    ReferenceDataFile,
    default_reference_data,
    load_reference_data,
    reference_data_from_dict,
)
from hidrocalha.data.tables import (
    DEFAULT_INITIAL_GUTTER_WIDTH,
    GUTTER_MATERIALS_N,
    INITIAL_GUTTER_WIDTHS,
    RAINFALL_INTENSITY_BR,
    SEMICIRCULAR_CAPACITY_NBR,
    SEMICIRCULAR_TABLE_N,
    STANDARD_DOWNSPOUT_DIAMETERS,
)

__all__ = [
    "ReferenceData",
    "ReferenceDataFile",
    "default_reference_data",
    "load_reference_data",
    "reference_data_from_dict",
    "DEFAULT_INITIAL_GUTTER_WIDTH",
    "GUTTER_MATERIALS_N",
    "INITIAL_GUTTER_WIDTHS",
    "RAINFALL_INTENSITY_BR",
    "SEMICIRCULAR_CAPACITY_NBR",
    "SEMICIRCULAR_TABLE_N",
    "STANDARD_DOWNSPOUT_DIAMETERS",
]
