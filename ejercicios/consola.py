"""Token-based console input and output over text streams."""

import sys
from collections import deque


class Consola:
    """Reads whitespace-separated tokens and writes text.

    Input behaves like a stream extraction: tokens may span several lines
    and several tokens may share one line.
    """

    def __init__(self, entrada=None, salida=None):
        self._entrada = entrada if entrada is not None else sys.stdin
        self._salida = salida if salida is not None else sys.stdout
        self._pendientes = deque()

    def leer_token(self):
        """Return the next whitespace-separated token; EOFError if none remain."""
        while not self._pendientes:
            linea = self._entrada.readline()
            if not linea:
                raise EOFError("no quedan datos de entrada")
            self._pendientes.extend(linea.split())
        return self._pendientes.popleft()

    def leer_entero(self):
        """Return the next token as an int."""
        token = self.leer_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"se esperaba un numero entero: {token!r}") from None

    def leer_real(self):
        """Return the next token as a float."""
        token = self.leer_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"se esperaba un numero: {token!r}") from None

    def escribir(self, texto):
        """Write text exactly as given and flush it."""
        self._salida.write(texto)
        self._salida.flush()


def formatear_numero(valor):
    """Format a number the way a default output stream does (6 significant digits)."""
    if isinstance(valor, int):
        return str(valor)
    return f"{valor:g}"