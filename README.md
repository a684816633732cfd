# ejercicios

Small console exercises (sign of a number, retirement age, areas, counting,
temperatures and prioritised tasks) and a few stand-alone demonstrations of
loops, conditionals and output.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Demonstrations

```
ejercicios-demos            # runs every demonstration
ejercicios-demos hola       # only the greeting
ejercicios-demos bucles     # a fixed sequence and a growing list
ejercicios-demos condicionales
```

`hola` prints a greeting, `bucles` walks a fixed array and a list that grows,
and `condicionales` shows that zero counts as false and any other integer as
true. The same texts are returned as strings by `ejercicios.demos.hola_mundo`,
`bucles` and `condicionales`.

## The exercises

The calculations are plain functions and classes:

```python
from ejercicios.basicos import area_cuadrado, area_triangulo, contar, describir_signo, puede_jubilarse
from ejercicios.temperaturas import AnalisisTemperaturas
from ejercicios.tareas import GestorTareas

area_triangulo(4, 3)          # 6.0
area_cuadrado(3)              # 9
puede_jubilarse(70)           # True  (strictly older than 65)
describir_signo(-2)           # 'El numero -2 es negativo.'
list(contar())[:3]            # [1, 2, 3]  (counts up to 100)

analisis = AnalisisTemperaturas()
analisis.agregar(21.5)
analisis.agregar(18.0)
analisis.maxima()             # 21.5
analisis.minima()             # 18.0  (ValueError when there are no readings)

gestor = GestorTareas()
gestor.agregar("informe", 2)
gestor.agregar("correo", 5)
[t.nombre for t in gestor.ordenadas()]   # ['correo', 'informe']
```

Each exercise also has an interactive form that talks through a
`Consola` from `ejercicios.consola`. A `Consola` wraps any input and output
text streams (standard input and output by default) and reads
whitespace-separated tokens, so several answers may be typed on one line:

```python
import io
from ejercicios.consola import Consola
from ejercicios.basicos import ejercicio_area

salida = io.StringIO()
ejercicio_area(Consola(io.StringIO("1 4 3\n"), salida))
# salida ends with "El area del triangulo es 6 unidades cuadradas.\n"
```

The interactive entry points are `ejercicio_jubilacion`, `ejercicio_signo`,
`ejercicio_area` and `ejercicio_contador` in `ejercicios.basicos`;
`AnalisisTemperaturas.introducir` (readings until a 0), `mostrar_maxima` and
`mostrar_minima`; and `GestorTareas.agregar_tarea` and `mostrar_tareas`.

## What the package does not do

There is no command that gathers the exercises behind an interactive menu,
and there is no exercise for recording grades. The exercises are run by
calling their functions from Python with a `Consola`.