import io

import pytest

from ejercicios.consola import Consola
from ejercicios.temperaturas import AnalisisTemperaturas


def _consola(texto=""):
    salida = io.StringIO()
    return Consola(io.StringIO(texto), salida), salida


def test_maxima_minima():
    analisis = AnalisisTemperaturas()
    for valor in (12.5, -4.0, 30.0, 7.0):
        analisis.agregar(valor)
    assert analisis.maxima() == 30.0
    assert analisis.minima() == -4.0


def test_empty_raises():
    analisis = AnalisisTemperaturas()
    with pytest.raises(ValueError):
        analisis.maxima()
    with pytest.raises(ValueError):
        analisis.minima()


def test_maxima_leaves_sorted():
    analisis = AnalisisTemperaturas()
    for valor in (5.0, 1.0, 3.0):
        analisis.agregar(valor)
    analisis.maxima()
    assert list(analisis) == [1.0, 3.0, 5.0]


def test_introducir_reads_until_zero():
    analisis = AnalisisTemperaturas()
    consola, salida = _consola("20\n-3.5\n0\n99\n")
    analisis.introducir(consola)
    assert list(analisis) == [20.0, -3.5]
    texto = salida.getvalue()
    assert "Las temperaturas introducidas son: \n" in texto
    assert texto.endswith("Temperatura 0:20\nTemperatura 1:-3.5\n")
    assert consola.leer_token() == "99"


def test_mostrar_vacio():
    analisis = AnalisisTemperaturas()
    consola, salida = _consola()
    analisis.mostrar_maxima(consola)
    analisis.mostrar_minima(consola)
    assert salida.getvalue() == "No existen registros\nNo hay registros\n"


def test_mostrar_valores():
    analisis = AnalisisTemperaturas()
    analisis.agregar(18.0)
    analisis.agregar(25.5)
    consola, salida = _consola()
    analisis.mostrar_maxima(consola)
    analisis.mostrar_minima(consola)
    assert salida.getvalue() == (
        "La temperatura máxima es de: 25.5\nLa temperatura mínima es de: 18\n"
    )