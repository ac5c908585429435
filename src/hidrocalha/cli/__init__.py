"""
CLI do HidroCalha - Dimensionamento de calhas e condutores verticais.

Sub-aplicações:
- calha: dimensionamento e curva-chave
- tabelas: consulta de intensidades e materiais
- assistente: formulário interativo
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from hidrocalha import __version__
from hidrocalha.cli.theme import CLITheme, ThemeName

# Criar aplicação principal
app = typer.Typer(
    name="hidrocalha",
    help="Dimensionamento de calhas e condutores verticais (NBR 10844).",
    no_args_is_help=True,
)


def _register_subapps():
    """Registra sub-aplicações de forma diferida."""
    from hidrocalha.cli.reference import reference_app
    from hidrocalha.cli.sizing import sizing_app

    app.add_typer(sizing_app, name="calha")
    app.add_typer(reference_app, name="tabelas")


@app.command()
def assistente(
    tables: Annotated[Optional[Path], typer.Option("--tabelas", help="Arquivo JSON de tabelas")] = None,
):
    """Assistente interativo de dimensionamento."""
    from hidrocalha.cli.sizing import load_reference
    from hidrocalha.cli.wizard import wizard_main
    wizard_main(load_reference(tables))


@app.command()
def versao():
    """Mostra a versão instalada."""
    typer.echo(f"hidrocalha {__version__}")


@app.callback()
def main(
    theme: Annotated[ThemeName, typer.Option("--tema", help="Tema de cores")] = ThemeName.DEFAULT,
):
    """
    HidroCalha - Calhas e condutores verticais pela NBR 10844.

    Usa intensidades pluviométricas tabeladas de cidades brasileiras,
    fórmula de Manning e o método de Frutuoso Dantas.
    """
    CLITheme.set_theme(theme)


_register_subapps()


__all__ = [
    "app",
]
