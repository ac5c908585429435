"""
HidroCalha - Dimensionamento de calhas e condutores verticais.

Implementa o dimensionamento de calhas (retangulares e semicirculares)
e condutores verticais segundo a NBR 10844, usando intensidades
pluviométricas tabeladas para cidades brasileiras.
"""

__version__ = "0.1.0"
