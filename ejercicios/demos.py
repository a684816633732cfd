"""Short demonstrations: greeting, loops and truthiness in conditionals."""

import argparse
import sys


def hola_mundo():
    """The classic greeting."""
    return "Hola mundo\n"


def bucles():
    """Iterate over a fixed sequence and over a list that grows."""
    numeros_fijos = (10, 20, 30, 40, 50)
    lineas = ["=== ARRAY CLASICO ==="]
    lineas.extend(
        f"Posicion {posicion}: {numero}"
        for posicion, numero in enumerate(numeros_fijos)
    )

    lista_dinamica = []
    lista_dinamica.append(100)
    lista_dinamica.append(200)
    lista_dinamica.append(300)

    lineas.append("\n=== VECTOR DINAMICO ===")
    lineas.append(f"Tamano actual: {len(lista_dinamica)}")
    lineas.extend(f"Valor: {numero}" for numero in lista_dinamica)
    return "\n".join(lineas) + "\n"


def condicionales():
    """Show that a zero counts as false and any other number as true."""
    partes = []
    vidas = 3
    if vidas > 0:
        partes.append("Estas vivo!\n")

    balas = 5
    if balas:
        partes.append("Tienes municion (True)\n")

    dinero = 0
    if dinero:
        partes.append("Eres rico")
    else:
        partes.append("No tienes dinero (False, porque es 0)\n")
    return "".join(partes)


DEMOS = {
    "hola": hola_mundo,
    "bucles": bucles,
    "condicionales": condicionales,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="ejercicios-demos", description="Demostraciones basicas."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=sorted(DEMOS),
        help="demostracion a ejecutar (por defecto, todas)",
    )
    args = parser.parse_args(argv)
    nombres = [args.demo] if args.demo else list(DEMOS)
    for nombre in nombres:
        sys.stdout.write(DEMOS[nombre]())
    return 0


if __name__ == "__main__":
    sys.exit(main())