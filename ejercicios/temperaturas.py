"""Recording temperatures and reporting the highest and lowest."""

from .consola import formatear_numero


class AnalisisTemperaturas:
    """A list of temperature readings.

    Asking for the maximum or minimum leaves the readings sorted.
    """

    def __init__(self):
        self._valores = []

    def __iter__(self):
        return iter(self._valores)

    def __len__(self):
        return len(self._valores)

    def agregar(self, valor):
        self._valores.append(valor)

    def maxima(self):
        """Highest reading; ValueError when there are none."""
        if not self._valores:
            raise ValueError("no existen registros")
        self._valores.sort()
        return self._valores[-1]

    def minima(self):
        """Lowest reading; ValueError when there are none."""
        if not self._valores:
            raise ValueError("no hay registros")
        self._valores.sort()
        return self._valores[0]

    def introducir(self, consola):
        """Read readings until a 0, then list every stored reading."""
        while True:
            consola.escribir("Introduzca una temperatura (0 para salir): \n")
            valor = consola.leer_real()
            if valor == 0:
                break
            self.agregar(valor)
        consola.escribir("Las temperaturas introducidas son: \n")
        for indice, valor in enumerate(self._valores):
            consola.escribir(f"Temperatura {indice}:{formatear_numero(valor)}\n")

    def mostrar_maxima(self, consola):
        try:
            valor = self.maxima()
        except ValueError:
            consola.escribir("No existen registros\n")
        else:
            consola.escribir(f"La temperatura máxima es de: {formatear_numero(valor)}\n")

    def mostrar_minima(self, consola):
        try:
            valor = self.minima()
        except ValueError:
            consola.escribir("No hay registros\n")
        else:
            consola.escribir(f"La temperatura mínima es de: {formatear_numero(valor)}\n")