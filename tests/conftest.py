"""Configuração do pytest para os testes do hidrocalha."""

import pytest

from hidrocalha.config import GutterShape, SizingInput
from hidrocalha.core import SizingEngine
from hidrocalha.data import ReferenceData, default_reference_data


@pytest.fixture
def reference():
    """Tabelas do sistema."""
    return default_reference_data()


@pytest.fixture
def engine(reference):
    return SizingEngine(reference)


@pytest.fixture
def sao_paulo_input():
    """Exemplo padrão: telhado 10 x 15 m, 30%, São Paulo (I = 172 mm/h)."""
    return SizingInput(
        roof_width_m=10,
        roof_length_m=15,
        roof_slope_pct=30,
        state="SP",
        city="São Paulo (Mirante Santana)",
        gutter_material="PVC",
        gutter_shape=GutterShape.RECTANGULAR,
        downspout_count=2,
    )


@pytest.fixture
def semicircular_input():
    """Telhado plano 6 x 10 m em São Paulo: Q = 172 L/min."""
    return SizingInput(
        roof_width_m=6,
        roof_length_m=10,
        roof_slope_pct=0,
        state="SP",
        city="São Paulo (Mirante Santana)",
        gutter_material="PVC",
        gutter_shape=GutterShape.SEMICIRCULAR,
        downspout_count=2,
    )


@pytest.fixture
def large_roof_input():
    """Telhado plano 100 x 100 m em Teresina: Q = 40000 L/min."""
    return SizingInput(
        roof_width_m=100,
        roof_length_m=100,
        roof_slope_pct=0,
        state="PI",
        city="Teresina",
        gutter_material="Chapa Metálica",
        gutter_shape=GutterShape.RECTANGULAR,
        downspout_count=2,
    )


@pytest.fixture
def fixture_reference():
    """Tabelas reduzidas para testes de injeção."""
    return ReferenceData(
        rainfall_intensity={"XX": {"Vila Teste": 100}},
        materials={"Liso": 0.011, "Rugoso": 0.015},
        semicircular_capacity={100: {"0.005": 50}, 150: {"0.005": 200}},
        downspout_diameters=(100, 75, 150),
        initial_gutter_widths=((10, 0.20),),
        default_initial_gutter_width=0.40,
    )
