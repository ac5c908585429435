"""
Validadores centralizados para entradas da CLI.

Proporcionam mensagens de erro consistentes; por padrão encerram
o comando com código 1.
"""

import typer

from hidrocalha.cli.theme import print_error, print_warning
from hidrocalha.data.reference import ReferenceData


def validate_positive(value: float, name: str, exit_on_error: bool = True) -> bool:
    """
    Valida que uma dimensão seja positiva.

    Args:
        value: Valor a validar
        name: Nome do campo na mensagem
        exit_on_error: Se True, encerra com erro

    Returns:
        True se válido, False se não
    """
    if value <= 0:
        print_error(f"{name} deve ser positivo(a) (recebido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_roof_slope(value: float, exit_on_error: bool = True) -> bool:
    """
    Valida a inclinação do telhado em %.

    Valores até 1 são aceitos, mas provavelmente foram informados em m/m.
    """
    if value < 0:
        print_error(f"Inclinação do telhado não pode ser negativa (recebido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    if 0 < value < 1:
        print_warning(f"Inclinação={value} parece estar em m/m. Informe em %.")
    return True


def validate_downspout_count(value: int, exit_on_error: bool = True) -> bool:
    """Valida o número de condutores (mínimo 2)."""
    if value < 2:
        print_error(f"São necessários ao menos 2 condutores verticais (recebido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_state(reference: ReferenceData, state: str, exit_on_error: bool = True) -> bool:
    """Valida que a UF conste da tabela de intensidades."""
    if state not in reference.rainfall_intensity:
        print_error(f"UF '{state}' não encontrada. Disponíveis: {', '.join(reference.states)}")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_material(reference: ReferenceData, material: str, exit_on_error: bool = True) -> bool:
    """Valida que o material tenha coeficiente de Manning cadastrado."""
    if material not in reference.materials:
        available = ", ".join(sorted(reference.materials))
        print_error(f"Material '{material}' não cadastrado. Disponíveis: {available}")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def parse_positive_float(text: str) -> bool | str:
    """Validador para questionary: True ou mensagem de erro."""
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        return "Informe um número"
    if value <= 0:
        return "O valor deve ser positivo"
    return True


def parse_non_negative_float(text: str) -> bool | str:
    """Validador para questionary: aceita zero (telhado plano)."""
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        return "Informe um número"
    if value < 0:
        return "O valor não pode ser negativo"
    return True


def parse_downspout_count(text: str) -> bool | str:
    """Validador para questionary: inteiro >= 2."""
    try:
        value = int(text)
    except ValueError:
        return "Informe um número inteiro"
    if value < 2:
        return "Mínimo de 2 condutores"
    return True
