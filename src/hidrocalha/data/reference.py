"""
Conjunto imutável de tabelas de referência do dimensionamento.

O motor de cálculo recebe um ReferenceData na construção, o que permite
substituir as tabelas do sistema por tabelas de projeto (arquivo JSON)
ou por fixtures de teste.

Formato do JSON (todas as chaves são opcionais):

    {
        "rainfall_intensity": {"UF": {"Cidade": 150}},
        "materials": {"PVC": 0.011},
        "semicircular_capacity": {"100": {"0.005": 130}},
        "downspout_diameters": [75, 100],
        "initial_gutter_widths": [[5, 0.15], [10, 0.20]],
        "default_initial_gutter_width": 0.60
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    PositiveFloat,
    ValidationError,
)

from hidrocalha.data.tables import (
    DEFAULT_INITIAL_GUTTER_WIDTH,
    GUTTER_MATERIALS_N,
    INITIAL_GUTTER_WIDTHS,
    RAINFALL_INTENSITY_BR,
    SEMICIRCULAR_CAPACITY_NBR,
    STANDARD_DOWNSPOUT_DIAMETERS,
)


def _freeze(mapping: Mapping) -> MappingProxyType:
    """Cópia somente leitura (um nível de aninhamento)."""
    return MappingProxyType({
        key: MappingProxyType(dict(value)) if isinstance(value, Mapping) else value
        for key, value in mapping.items()
    })


@dataclass(frozen=True)
class ReferenceData:
    """Tabelas de referência usadas pelo motor de dimensionamento."""
    rainfall_intensity: Mapping[str, Mapping[str, float]]
    materials: Mapping[str, float]
    semicircular_capacity: Mapping[int, Mapping[str, float]]
    downspout_diameters: tuple[float, ...]
    initial_gutter_widths: tuple[tuple[float, float], ...]
    default_initial_gutter_width: float = DEFAULT_INITIAL_GUTTER_WIDTH

    def __post_init__(self):
        if not self.downspout_diameters:
            raise ValueError("Catálogo de diâmetros de condutores está vazio")
        if not self.semicircular_capacity:
            raise ValueError("Tabela de calhas semicirculares está vazia")

        # frozen=True: atribuição via object.__setattr__
        object.__setattr__(self, "rainfall_intensity", _freeze(self.rainfall_intensity))
        object.__setattr__(self, "materials", MappingProxyType(dict(self.materials)))
        object.__setattr__(
            self,
            "semicircular_capacity",
            _freeze(dict(sorted(self.semicircular_capacity.items()))),
        )
        object.__setattr__(
            self, "downspout_diameters", tuple(sorted(self.downspout_diameters))
        )
        object.__setattr__(
            self,
            "initial_gutter_widths",
            tuple(sorted(
                (float(length), float(width))
                for length, width in self.initial_gutter_widths
            )),
        )

    @property
    def states(self) -> list[str]:
        """UFs disponíveis, em ordem alfabética."""
        return sorted(self.rainfall_intensity.keys())

    def cities(self, state: str) -> list[str]:
        """Cidades de uma UF, em ordem alfabética (vazio se a UF não existe)."""
        return sorted(self.rainfall_intensity.get(state, {}).keys())

    @property
    def max_downspout_diameter(self) -> float:
        return self.downspout_diameters[-1]


def default_reference_data() -> ReferenceData:
    """Tabelas do sistema (NBR 10844 e Plínio Tomaz)."""
    return ReferenceData(
        rainfall_intensity=RAINFALL_INTENSITY_BR,
        materials=GUTTER_MATERIALS_N,
        semicircular_capacity=SEMICIRCULAR_CAPACITY_NBR,
        downspout_diameters=STANDARD_DOWNSPOUT_DIAMETERS,
        initial_gutter_widths=INITIAL_GUTTER_WIDTHS,
    )


class ReferenceDataFile(BaseModel):
    """Estrutura de um arquivo JSON de tabelas (todas as chaves opcionais)."""
    model_config = ConfigDict(extra="forbid")

    rainfall_intensity: Optional[dict[str, dict[str, NonNegativeFloat]]] = None
    materials: Optional[dict[str, PositiveFloat]] = None
    semicircular_capacity: Optional[dict[int, dict[str, PositiveFloat]]] = Field(
        default=None, min_length=1
    )
    downspout_diameters: Optional[list[PositiveFloat]] = Field(default=None, min_length=1)
    initial_gutter_widths: Optional[list[tuple[PositiveFloat, PositiveFloat]]] = None
    default_initial_gutter_width: Optional[PositiveFloat] = None


def reference_data_from_dict(
    data: dict[str, Any],
    base: Optional[ReferenceData] = None,
) -> ReferenceData:
    """
    Constrói ReferenceData a partir de um dicionário.

    Chaves ausentes usam os valores de `base` (tabelas do sistema se None).
    Valores numéricos em texto ("0.011") são convertidos.

    Args:
        data: Dicionário no formato descrito no módulo
        base: Tabelas usadas para as chaves ausentes

    Returns:
        ReferenceData

    Raises:
        ValueError: Se a estrutura ou os valores forem inválidos
    """
    base = base or default_reference_data()

    try:
        parsed = ReferenceDataFile.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '(raiz)'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValueError(f"Tabelas inválidas: {problems}") from e

    def pick(value, fallback):
        return fallback if value is None else value

    return ReferenceData(
        rainfall_intensity=pick(parsed.rainfall_intensity, base.rainfall_intensity),
        materials=pick(parsed.materials, base.materials),
        semicircular_capacity=pick(parsed.semicircular_capacity, base.semicircular_capacity),
        downspout_diameters=tuple(pick(parsed.downspout_diameters, base.downspout_diameters)),
        initial_gutter_widths=pick(parsed.initial_gutter_widths, base.initial_gutter_widths),
        default_initial_gutter_width=pick(
            parsed.default_initial_gutter_width, base.default_initial_gutter_width
        ),
    )


def load_reference_data(path: Path | str) -> ReferenceData:
    """
    Carrega tabelas de projeto de um arquivo JSON.

    Args:
        path: Caminho do arquivo

    Returns:
        ReferenceData com as chaves do arquivo sobre as tabelas do sistema

    Raises:
        FileNotFoundError: Se o arquivo não existe
        ValueError: Se o JSON ou sua estrutura forem inválidos
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Arquivo de tabelas não encontrado: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Formato inválido em {path}: esperado objeto JSON")

    try:
        return reference_data_from_dict(data)
    except ValueError as e:
        raise ValueError(f"Formato inválido em {path}: {e}") from e
