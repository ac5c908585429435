"""
Exceções e avisos do dimensionamento.

Falhas que interrompem o cálculo herdam de SizingError (ValueError) e
carregam o SizingErrorKind correspondente. A insuficiência do catálogo
de condutores não interrompe o cálculo: é emitida como aviso.
"""

from hidrocalha.config import SizingErrorKind


MSG_RAINFALL_NOT_FOUND = "Dados de chuva não encontrados para a cidade selecionada."
MSG_UNKNOWN_MATERIAL = "Material da calha não cadastrado: {material}."
MSG_UNSUPPORTED_MATERIAL = (
    "Cálculo para calhas semicirculares está disponível apenas para "
    "materiais com n=0,011 (Aço, PVC, etc)."
)
MSG_NO_SEMICIRCULAR_GUTTER = (
    "Nenhuma calha semicircular padrão suporta a vazão. "
    "Considere dividir a área de captação."
)
MSG_NO_RECTANGULAR_GUTTER = (
    "A calha retangular de {width_cm:.0f} cm não escoa a vazão com lâmina "
    "de até {max_depth_cm:.0f} cm. Considere dividir a área de captação."
)
MSG_NO_DOWNSPOUT = (
    "Nenhum diâmetro de duto atende a solicitação. Aumente a quantidade "
    "de dutos de descida ou revise o projeto."
)


class SizingError(ValueError):
    """Falha que interrompe o dimensionamento."""

    kind: SizingErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RainfallLookupError(SizingError):
    """UF/cidade sem intensidade pluviométrica tabelada."""
    kind = SizingErrorKind.LOOKUP_FAILURE

    def __init__(self, state: str, city: str):
        super().__init__(MSG_RAINFALL_NOT_FOUND)
        self.state = state
        self.city = city


class UnknownMaterialError(SizingError):
    """Material sem coeficiente de Manning cadastrado."""
    kind = SizingErrorKind.UNKNOWN_MATERIAL

    def __init__(self, material: str):
        super().__init__(MSG_UNKNOWN_MATERIAL.format(material=material))
        self.material = material


class UnsupportedMaterialError(SizingError):
    """Calha semicircular com n diferente do tabelado pela NBR 10844."""
    kind = SizingErrorKind.UNSUPPORTED_MATERIAL

    def __init__(self, manning_n: float):
        super().__init__(MSG_UNSUPPORTED_MATERIAL)
        self.manning_n = manning_n


class NoFeasibleGutterError(SizingError):
    """Nenhuma seção de calha escoa a vazão de projeto."""
    kind = SizingErrorKind.NO_FEASIBLE_GUTTER


class NoFeasibleDownspoutWarning(UserWarning):
    """Diâmetro calculado excede o maior diâmetro comercial."""
