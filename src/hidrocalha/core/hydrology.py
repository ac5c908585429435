"""
Hidrologia do telhado.

Intensidade pluviométrica tabelada, área de contribuição e vazão
de projeto segundo a NBR 10844:

    A = (a + h/2) × b
    Q = I × A / 60   [Q: L/min, I: mm/h, A: m²]
"""

from hidrocalha.core.errors import RainfallLookupError
from hidrocalha.data.reference import ReferenceData


def get_rainfall_intensity(reference: ReferenceData, state: str, city: str) -> float:
    """
    Obtém a intensidade pluviométrica tabelada de uma cidade.

    Args:
        reference: Tabelas de referência
        state: UF
        city: Nome da cidade, como consta na tabela

    Returns:
        Intensidade em mm/h

    Raises:
        RainfallLookupError: Se UF/cidade não constam na tabela
    """
    intensity = reference.rainfall_intensity.get(state, {}).get(city)
    if not intensity:
        raise RainfallLookupError(state, city)
    return intensity


def roof_rise(roof_width_m: float, roof_slope_pct: float) -> float:
    """Altura h do plano inclinado do telhado (m)."""
    return roof_width_m * (roof_slope_pct / 100)


def contribution_area(
    roof_width_m: float,
    roof_length_m: float,
    roof_slope_pct: float,
) -> float:
    """
    Área de contribuição de uma superfície inclinada.

    A = (a + h/2) × b, onde h = a × i/100 considera a chuva
    incidente inclinada pelo vento sobre o plano do telhado.

    Args:
        roof_width_m: Largura a do telhado (m)
        roof_length_m: Comprimento b do telhado, paralelo à calha (m)
        roof_slope_pct: Inclinação do telhado (%)

    Returns:
        Área de contribuição em m²
    """
    if roof_width_m <= 0 or roof_length_m <= 0:
        raise ValueError("Dimensões do telhado devem ser > 0")

    h = roof_rise(roof_width_m, roof_slope_pct)
    return (roof_width_m + h / 2) * roof_length_m


def design_flow_rate(intensity_mmhr: float, area_m2: float) -> float:
    """
    Vazão de projeto Q = I × A / 60 em L/min.

    1 mm/h sobre 1 m² equivale a 1 L/h, ou 1/60 L/min.
    """
    return intensity_mmhr * area_m2 / 60
