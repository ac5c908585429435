"""
Motor de dimensionamento de calhas e condutores verticais.

Encadeia as três etapas, sempre nesta ordem:

1. Hidrologia: intensidade tabelada, área de contribuição e vazão
2. Calha: seção retangular (Manning) ou semicircular (NBR 10844)
3. Condutores: diâmetro por Frutuoso Dantas, ajustado ao catálogo

O cálculo é puro: o resultado depende apenas da entrada e das
tabelas de referência injetadas no motor.
"""

from typing import Optional

from hidrocalha.config import (
    GutterShape,
    SizingFailure,
    SizingInput,
    SizingOutcome,
    SizingResult,
    SizingSuccess,
)
from hidrocalha.core.downspout import size_downspouts
from hidrocalha.core.errors import SizingError
from hidrocalha.core.gutter import (
    MIN_GUTTER_SLOPE,
    GutterSection,
    get_manning_n,
    size_rectangular_gutter,
    size_semicircular_gutter,
)
from hidrocalha.core.hydrology import (
    contribution_area,
    design_flow_rate,
    get_rainfall_intensity,
    roof_rise,
)
from hidrocalha.data.reference import ReferenceData, default_reference_data


class SizingEngine:
    """
    Motor de dimensionamento com tabelas de referência injetadas.

    Uso:
        engine = SizingEngine()
        outcome = engine.size(SizingInput(...))
        if outcome.ok:
            print(outcome.result.downspout_diameter_mm)
    """

    def __init__(self, reference: Optional[ReferenceData] = None):
        self.reference = reference or default_reference_data()

    def _size_gutter(self, data: SizingInput, flow_rate: float) -> GutterSection:
        n = get_manning_n(self.reference, data.gutter_material)

        if data.gutter_shape == GutterShape.SEMICIRCULAR:
            return size_semicircular_gutter(flow_rate, n, self.reference, MIN_GUTTER_SLOPE)

        return size_rectangular_gutter(
            flow_rate, data.roof_length_m, n, self.reference, MIN_GUTTER_SLOPE
        )

    def compute(self, data: SizingInput) -> SizingResult:
        """
        Executa o dimensionamento completo.

        Raises:
            SizingError: Falha de consulta, material ou seção inviável
        """
        intensity = get_rainfall_intensity(self.reference, data.state, data.city)
        area = contribution_area(data.roof_width_m, data.roof_length_m, data.roof_slope_pct)
        flow_rate = design_flow_rate(intensity, area)

        gutter = self._size_gutter(data, flow_rate)

        downspout = size_downspouts(
            flow_rate,
            data.downspout_count,
            gutter.water_depth_m,
            self.reference.downspout_diameters,
        )

        return SizingResult(
            flow_rate_lmin=flow_rate,
            contribution_area_m2=area,
            rainfall_intensity_mmhr=intensity,
            gutter_width_cm=gutter.width_m * 100,
            water_depth_cm=gutter.water_depth_m * 100,
            total_gutter_height_cm=gutter.total_height_m * 100,
            downspout_diameter_mm=downspout.diameter_mm,
            downspout_warning=downspout.warning,
            roof_rise_m=roof_rise(data.roof_width_m, data.roof_slope_pct),
            gutter_shape=gutter.shape,
            manning_n=gutter.manning_n,
            downspout_required_mm=downspout.required_mm,
            downspout_regime=downspout.regime,
            downspout_feasible=downspout.feasible,
        )

    def size(self, data: SizingInput) -> SizingOutcome:
        """
        Dimensiona e retorna um resultado discriminado.

        Returns:
            SizingSuccess com o resultado, ou SizingFailure com tipo e mensagem
        """
        try:
            result = self.compute(data)
        except SizingError as e:
            return SizingFailure(kind=e.kind, message=e.message)
        return SizingSuccess(result=result)

    def calculate(self, data: SizingInput) -> SizingResult:
        """
        Dimensiona no formato legado: falhas viram resultado zerado.

        A mensagem da falha vai para downspout_warning; quem consome o
        resultado deve sempre verificar esse campo antes dos valores.
        """
        outcome = self.size(data)
        if isinstance(outcome, SizingFailure):
            return SizingResult.zeroed(outcome.message)
        return outcome.result


def size_gutter_system(
    data: SizingInput,
    reference: Optional[ReferenceData] = None,
) -> SizingOutcome:
    """Atalho para SizingEngine(reference).size(data)."""
    return SizingEngine(reference).size(data)


def calculate_gutter_and_downspout(
    data: SizingInput,
    reference: Optional[ReferenceData] = None,
) -> SizingResult:
    """Atalho para SizingEngine(reference).calculate(data)."""
    return SizingEngine(reference).calculate(data)
