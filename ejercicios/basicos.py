"""Small standalone exercises: retirement, sign, areas and counting."""

from .consola import formatear_numero

EDAD_JUBILACION = 65


def puede_jubilarse(edad):
    """True when the age is strictly above the retirement age."""
    return edad > EDAD_JUBILACION


def describir_signo(num):
    """Describe whether an integer is positive, negative or zero."""
    if num > 0:
        return f"El numero {num} es positivo"
    if num < 0:
        return f"El numero {num} es negativo."
    return f"El numero {num} es cero."


def area_triangulo(base, altura):
    """Area of a triangle."""
    return (base * altura) / 2


def area_cuadrado(lado):
    """Area of a square."""
    return lado * lado


def contar():
    """Yield the integers from 1 to 100."""
    yield from range(1, 101)


def ejercicio_jubilacion(consola):
    consola.escribir("Introduzca la edad: \n")
    edad = consola.leer_entero()
    if puede_jubilarse(edad):
        consola.escribir("Puede jubilarse\n")
    else:
        consola.escribir("No puede jubilarse\n")


def ejercicio_signo(consola):
    consola.escribir("Ingrese un numero entero: ")
    num = consola.leer_entero()
    consola.escribir(describir_signo(num) + "\n")


def ejercicio_area(consola):
    consola.escribir("Seleccione figura: \n1. Triangulo.\n2. Cuadrado.\n")
    seleccion = consola.leer_entero()
    if seleccion == 1:
        consola.escribir("Introduzca la base: \n")
        base = consola.leer_real()
        consola.escribir("Introduzca la altura\n")
        altura = consola.leer_real()
        area = area_triangulo(base, altura)
        consola.escribir(
            f"El area del triangulo es {formatear_numero(area)} unidades cuadradas.\n"
        )
    elif seleccion == 2:
        consola.escribir("Introduzca el lado: \n")
        lado = consola.leer_real()
        area = area_cuadrado(lado)
        consola.escribir(
            f"El area del cuadrado es {formatear_numero(area)} unidades cuadradas.\n"
        )
    else:
        consola.escribir("Seleccione una opcion valida.\n")


def ejercicio_contador(consola):
    for numero in contar():
        consola.escribir(f"Numero: {numero}\n")