"""Testes para o motor de dimensionamento."""

import warnings

import pytest
from pydantic import ValidationError

from hidrocalha.config import (
    DownspoutRegime,
    GutterShape,
    SizingErrorKind,
    SizingFailure,
    SizingInput,
    SizingResult,
    SizingSuccess,
)
from hidrocalha.core import (
    NoFeasibleDownspoutWarning,
    SizingEngine,
    calculate_gutter_and_downspout,
    manning_discharge,
    size_gutter_system,
)
from hidrocalha.core.errors import (
    MSG_NO_DOWNSPOUT,
    MSG_NO_SEMICIRCULAR_GUTTER,
    MSG_RAINFALL_NOT_FOUND,
    MSG_UNSUPPORTED_MATERIAL,
)


ZEROED_FIELDS = (
    "flow_rate_lmin",
    "contribution_area_m2",
    "rainfall_intensity_mmhr",
    "gutter_width_cm",
    "water_depth_cm",
    "total_gutter_height_cm",
    "downspout_diameter_mm",
)


class TestSizingInput:
    """Testes para validação da entrada."""

    def test_defaults_match_form(self):
        data = SizingInput()
        assert data.roof_width_m == 10
        assert data.roof_length_m == 15
        assert data.city == "São Paulo (Mirante Santana)"
        assert data.gutter_shape == GutterShape.RECTANGULAR
        assert data.downspout_count == 2

    def test_minimum_two_downspouts(self):
        with pytest.raises(ValidationError):
            SizingInput(downspout_count=1)

    def test_positive_dimensions(self):
        with pytest.raises(ValidationError):
            SizingInput(roof_width_m=0)
        with pytest.raises(ValidationError):
            SizingInput(roof_length_m=-5)

    def test_shape_from_string(self):
        assert SizingInput(gutter_shape="semicircular").gutter_shape == GutterShape.SEMICIRCULAR

    def test_frozen(self):
        data = SizingInput()
        with pytest.raises(ValidationError):
            data.roof_width_m = 20


class TestSaoPauloScenario:
    """Exemplo padrão: 10 x 15 m, 30%, São Paulo (Mirante Santana), PVC."""

    def test_hydrology(self, engine, sao_paulo_input):
        result = engine.calculate(sao_paulo_input)

        assert result.rainfall_intensity_mmhr == 172
        assert result.contribution_area_m2 == pytest.approx(172.5)
        assert result.flow_rate_lmin == pytest.approx(494.5)
        assert result.roof_rise_m == pytest.approx(3.0)

    def test_gutter(self, engine, sao_paulo_input):
        result = engine.calculate(sao_paulo_input)

        assert result.gutter_shape == GutterShape.RECTANGULAR
        assert result.gutter_width_cm == pytest.approx(30.0)
        assert result.water_depth_cm == pytest.approx(4.2)
        assert result.total_gutter_height_cm == pytest.approx(6.2)

    def test_downspout(self, engine, sao_paulo_input):
        result = engine.calculate(sao_paulo_input)

        assert result.downspout_diameter_mm == 100
        assert result.downspout_regime == DownspoutRegime.FREE
        assert result.downspout_feasible
        assert result.downspout_warning is None

    def test_strict_api(self, engine, sao_paulo_input):
        outcome = engine.size(sao_paulo_input)

        assert isinstance(outcome, SizingSuccess)
        assert outcome.ok
        assert outcome.result == engine.calculate(sao_paulo_input)


class TestSemicircularScenario:
    """Calha semicircular: Q = 172 L/min → Ø 125 mm."""

    def test_gutter(self, engine, semicircular_input):
        result = engine.calculate(semicircular_input)

        assert result.flow_rate_lmin == pytest.approx(172.0)
        assert result.gutter_width_cm == pytest.approx(12.5)
        assert result.water_depth_cm == pytest.approx(6.25)
        assert result.total_gutter_height_cm == pytest.approx(8.125)
        assert result.downspout_diameter_mm == 75

    def test_unsupported_material(self, engine, semicircular_input):
        """Material com n != 0,011 não tem tabela semicircular."""
        data = semicircular_input.model_copy(update={"gutter_material": "Cerâmica"})
        outcome = engine.size(data)

        assert isinstance(outcome, SizingFailure)
        assert outcome.kind == SizingErrorKind.UNSUPPORTED_MATERIAL
        assert outcome.message == MSG_UNSUPPORTED_MATERIAL

    def test_unsupported_material_legacy(self, engine, semicircular_input):
        data = semicircular_input.model_copy(update={"gutter_material": "Alvenaria de Tijolos"})
        result = engine.calculate(data)

        assert result.downspout_warning == MSG_UNSUPPORTED_MATERIAL
        for field in ZEROED_FIELDS:
            assert getattr(result, field) == 0

    def test_no_feasible_gutter(self, engine):
        """Q = 860 L/min excede a calha de 200 mm (829 L/min)."""
        data = SizingInput(
            roof_width_m=10,
            roof_length_m=30,
            roof_slope_pct=0,
            gutter_material="PVC",
            gutter_shape=GutterShape.SEMICIRCULAR,
        )
        outcome = engine.size(data)

        assert isinstance(outcome, SizingFailure)
        assert outcome.kind == SizingErrorKind.NO_FEASIBLE_GUTTER

        result = engine.calculate(data)
        assert result.downspout_warning == MSG_NO_SEMICIRCULAR_GUTTER
        assert result.flow_rate_lmin == 0


class TestFailures:
    """Testes para falhas que interrompem o dimensionamento."""

    def test_unknown_city(self, engine):
        data = SizingInput(state="SP", city="Campinas")
        outcome = engine.size(data)

        assert isinstance(outcome, SizingFailure)
        assert not outcome.ok
        assert outcome.kind == SizingErrorKind.LOOKUP_FAILURE
        assert outcome.message == MSG_RAINFALL_NOT_FOUND

    def test_unknown_city_legacy(self, engine):
        """Formato legado: resultado zerado com a mensagem no aviso."""
        result = engine.calculate(SizingInput(state="MG", city="Uberlândia"))

        assert result.downspout_warning == "Dados de chuva não encontrados para a cidade selecionada."
        assert not result.downspout_feasible
        for field in ZEROED_FIELDS:
            assert getattr(result, field) == 0

    def test_unknown_material(self, engine):
        outcome = engine.size(SizingInput(gutter_material="Madeira"))

        assert isinstance(outcome, SizingFailure)
        assert outcome.kind == SizingErrorKind.UNKNOWN_MATERIAL

    def test_rectangular_infeasible(self, engine):
        """Telhado de 5 m de comprimento (calha 15 cm) com 4000 L/min."""
        data = SizingInput(
            roof_width_m=200,
            roof_length_m=5,
            roof_slope_pct=0,
            state="PI",
            city="Teresina",
        )
        outcome = engine.size(data)

        assert isinstance(outcome, SizingFailure)
        assert outcome.kind == SizingErrorKind.NO_FEASIBLE_GUTTER

    def test_zeroed_factory(self):
        result = SizingResult.zeroed("falha")
        assert result.downspout_warning == "falha"
        assert result.downspout_diameter_mm == 0


class TestDownspoutFallback:
    """Diâmetro calculado acima de 300 mm: adota 300 mm com aviso."""

    def test_warning_and_largest_diameter(self, engine, large_roof_input):
        with pytest.warns(NoFeasibleDownspoutWarning):
            outcome = engine.size(large_roof_input)

        assert isinstance(outcome, SizingSuccess)
        result = outcome.result
        assert result.downspout_diameter_mm == 300
        assert result.downspout_required_mm > 300
        assert result.downspout_warning == MSG_NO_DOWNSPOUT
        assert not result.downspout_feasible

    def test_gutter_fields_valid(self, engine, large_roof_input):
        with pytest.warns(NoFeasibleDownspoutWarning):
            result = engine.calculate(large_roof_input)

        assert result.flow_rate_lmin == pytest.approx(40000)
        assert result.gutter_width_cm == pytest.approx(60.0)
        assert result.water_depth_cm > 0
        assert result.total_gutter_height_cm > result.water_depth_cm


class TestProperties:
    """Propriedades gerais do motor."""

    def test_intensity_from_table(self, engine, reference):
        """Intensidade do resultado é exatamente a da tabela, para toda cidade."""
        for state, cities in reference.rainfall_intensity.items():
            for city, intensity in cities.items():
                data = SizingInput(roof_width_m=4, roof_length_m=6, state=state, city=city)
                result = engine.calculate(data)
                assert result.rainfall_intensity_mmhr == intensity

    @pytest.mark.parametrize("width,length,slope", [
        (10, 15, 30),
        (7.3, 11.1, 17.5),
        (3, 22, 45),
        (12, 4, 0),
    ])
    def test_flow_identity(self, engine, width, length, slope):
        """Q = I × A / 60 e A = (a + a·i/200) × b."""
        data = SizingInput(roof_width_m=width, roof_length_m=length, roof_slope_pct=slope)
        result = engine.calculate(data)

        assert result.flow_rate_lmin == result.rainfall_intensity_mmhr * result.contribution_area_m2 / 60
        assert result.contribution_area_m2 == pytest.approx(
            (width + width * slope / 200) * length, rel=1e-12
        )

    @pytest.mark.parametrize("width,length,material", [
        (10, 15, "PVC"),
        (6, 4, "Cerâmica"),
        (15, 22, "Concreto Alisado"),
        (25, 40, "Alvenaria de Tijolos"),
    ])
    def test_rectangular_depth_is_minimal(self, engine, reference, width, length, material):
        """Lâmina − 1 mm não atende a vazão (exceto no piso de 1 mm)."""
        data = SizingInput(roof_width_m=width, roof_length_m=length, gutter_material=material)
        result = engine.calculate(data)

        n = reference.materials[material]
        gutter_width = result.gutter_width_cm / 100
        flow_m3s = result.flow_rate_lmin / 60000
        depth_mm = round(result.water_depth_cm * 10)

        assert manning_discharge(gutter_width, depth_mm / 1000, n) >= flow_m3s
        if depth_mm > 1:
            assert manning_discharge(gutter_width, (depth_mm - 1) / 1000, n) < flow_m3s

    @pytest.mark.parametrize("shape", [GutterShape.RECTANGULAR, GutterShape.SEMICIRCULAR])
    def test_monotonic_downspout_count(self, engine, shape):
        """Mais condutores nunca aumentam o diâmetro."""
        diameters = []
        for count in range(2, 13):
            data = SizingInput(
                roof_width_m=8, roof_length_m=10, gutter_material="PVC",
                gutter_shape=shape, downspout_count=count,
            )
            diameters.append(engine.calculate(data).downspout_diameter_mm)

        assert all(a >= b for a, b in zip(diameters, diameters[1:]))

    def test_idempotent(self, engine, sao_paulo_input):
        first = engine.calculate(sao_paulo_input)
        second = engine.calculate(sao_paulo_input)
        assert first.model_dump() == second.model_dump()

    def test_engine_instances_agree(self, sao_paulo_input):
        assert SizingEngine().calculate(sao_paulo_input) == SizingEngine().calculate(sao_paulo_input)

    def test_building_height_unused(self, engine, sao_paulo_input):
        taller = sao_paulo_input.model_copy(update={"building_height_m": 30})
        assert engine.calculate(taller) == engine.calculate(sao_paulo_input)


class TestInjectedReference:
    """Testes com tabelas injetadas."""

    def test_fixture_tables(self, fixture_reference):
        data = SizingInput(
            roof_width_m=6, roof_length_m=8, roof_slope_pct=0,
            state="XX", city="Vila Teste", gutter_material="Liso",
        )
        result = SizingEngine(fixture_reference).calculate(data)

        assert result.rainfall_intensity_mmhr == 100
        assert result.flow_rate_lmin == pytest.approx(80.0)
        assert result.gutter_width_cm == pytest.approx(20.0)
        assert result.downspout_diameter_mm in (75, 100, 150)

    def test_fixture_unsupported_material(self, fixture_reference):
        data = SizingInput(
            roof_width_m=6, roof_length_m=8, state="XX", city="Vila Teste",
            gutter_material="Rugoso", gutter_shape=GutterShape.SEMICIRCULAR,
        )
        outcome = size_gutter_system(data, fixture_reference)

        assert isinstance(outcome, SizingFailure)
        assert outcome.kind == SizingErrorKind.UNSUPPORTED_MATERIAL

    def test_default_tables_miss_fixture_city(self):
        data = SizingInput(state="XX", city="Vila Teste")
        result = calculate_gutter_and_downspout(data)
        assert result.downspout_warning == MSG_RAINFALL_NOT_FOUND

    def test_fixture_downspout_catalog_fallback(self, fixture_reference):
        """Maior diâmetro do catálogo injetado é o de fallback."""
        data = SizingInput(
            roof_width_m=60, roof_length_m=60, roof_slope_pct=0,
            state="XX", city="Vila Teste", gutter_material="Liso",
        )
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NoFeasibleDownspoutWarning)
            result = SizingEngine(fixture_reference).calculate(data)

        assert result.downspout_diameter_mm == 150
        assert not result.downspout_feasible
