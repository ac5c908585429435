"""Modelos Pydantic para entrada, resultados e validação de dados."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GutterShape(str, Enum):
    """Formato da seção da calha."""
    RECTANGULAR = "rectangular"
    SEMICIRCULAR = "semicircular"


class DownspoutRegime(str, Enum):
    """Regime de escoamento na entrada do condutor vertical."""
    FREE = "livre"          # H/d > 1/3, vertedor
    ORIFICE = "orificio"    # H/d <= 1/3, orifício


class SizingErrorKind(str, Enum):
    """Tipos de falha do dimensionamento."""
    LOOKUP_FAILURE = "lookup_failure"
    UNKNOWN_MATERIAL = "unknown_material"
    UNSUPPORTED_MATERIAL = "unsupported_material"
    NO_FEASIBLE_GUTTER = "no_feasible_gutter"


# ============================================================================
# Entrada
# ============================================================================

class SizingInput(BaseModel):
    """Dados de entrada do dimensionamento (telhado, local e calha)."""
    model_config = ConfigDict(frozen=True)

    roof_width_m: float = Field(default=10.0, gt=0, description="Largura do telhado (m)")
    roof_length_m: float = Field(default=15.0, gt=0, description="Comprimento do telhado (m)")
    roof_slope_pct: float = Field(default=30.0, ge=0, description="Inclinação do telhado (%)")
    state: str = Field(default="SP", min_length=1, description="Estado (UF)")
    city: str = Field(
        default="São Paulo (Mirante Santana)", min_length=1, description="Cidade"
    )
    gutter_material: str = Field(
        default="Chapa Metálica", min_length=1, description="Material da calha"
    )
    gutter_shape: GutterShape = Field(
        default=GutterShape.RECTANGULAR, description="Formato da calha"
    )
    downspout_count: int = Field(default=2, ge=2, description="Nº de condutores verticais")
    # Reservado para perdas de carga no condutor; não entra no cálculo
    building_height_m: float = Field(default=3.0, ge=0, description="Altura da edificação (m)")


# ============================================================================
# Resultados
# ============================================================================

class SizingResult(BaseModel):
    """Resultado do dimensionamento de calha e condutores."""
    flow_rate_lmin: float = Field(..., description="Vazão de projeto (L/min)")
    contribution_area_m2: float = Field(..., description="Área de contribuição (m²)")
    rainfall_intensity_mmhr: float = Field(..., description="Intensidade pluviométrica (mm/h)")
    gutter_width_cm: float = Field(..., description="Largura da calha (cm)")
    water_depth_cm: float = Field(..., description="Lâmina d'água (cm)")
    total_gutter_height_cm: float = Field(..., description="Altura total da calha (cm)")
    downspout_diameter_mm: float = Field(..., description="Diâmetro comercial do condutor (mm)")
    downspout_warning: Optional[str] = Field(None, description="Aviso de dimensionamento")

    roof_rise_m: float = Field(default=0.0, description="Altura da cumeeira (m)")
    gutter_shape: Optional[GutterShape] = Field(None, description="Formato da calha")
    manning_n: Optional[float] = Field(None, description="Coeficiente de Manning")
    downspout_required_mm: float = Field(default=0.0, description="Diâmetro calculado (mm)")
    downspout_regime: Optional[DownspoutRegime] = Field(None, description="Regime de entrada")
    downspout_feasible: bool = Field(default=True, description="Diâmetro do catálogo atende")

    @classmethod
    def zeroed(cls, message: str) -> "SizingResult":
        """Resultado nulo com a mensagem de falha no campo de aviso."""
        return cls(
            flow_rate_lmin=0,
            contribution_area_m2=0,
            rainfall_intensity_mmhr=0,
            gutter_width_cm=0,
            water_depth_cm=0,
            total_gutter_height_cm=0,
            downspout_diameter_mm=0,
            downspout_warning=message,
            downspout_feasible=False,
        )


class SizingSuccess(BaseModel):
    """Dimensionamento concluído."""
    status: Literal["ok"] = "ok"
    result: SizingResult

    @property
    def ok(self) -> bool:
        return True


class SizingFailure(BaseModel):
    """Dimensionamento interrompido por uma falha."""
    status: Literal["error"] = "error"
    kind: SizingErrorKind = Field(..., description="Tipo de falha")
    message: str = Field(..., description="Mensagem para o usuário")

    @property
    def ok(self) -> bool:
        return False


SizingOutcome = SizingSuccess | SizingFailure
