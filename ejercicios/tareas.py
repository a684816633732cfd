"""Tasks with priorities, listed from highest priority to lowest."""

from dataclasses import dataclass


@dataclass
class Tarea:
    nombre: str = ""
    prioridad: int = 0


class GestorTareas:
    """Keeps tasks; listing them leaves them sorted by descending priority."""

    def __init__(self):
        self._lista = []

    def __iter__(self):
        return iter(self._lista)

    def __len__(self):
        return len(self._lista)

    def agregar(self, nombre, prioridad):
        tarea = Tarea(nombre, prioridad)
        self._lista.append(tarea)
        return tarea

    def ordenadas(self):
        """Sort the stored tasks by descending priority and return them."""
        self._lista.sort(key=lambda tarea: tarea.prioridad, reverse=True)
        return list(self._lista)

    def agregar_tarea(self, consola):
        consola.escribir("Introduzca el nombre de la tarea: \n")
        nombre = consola.leer_token()
        consola.escribir("Introduzca la prioridad: \n")
        prioridad = consola.leer_entero()
        self.agregar(nombre, prioridad)
        consola.escribir("--- Tarea añadida ---\n")

    def mostrar_tareas(self, consola):
        if not self._lista:
            consola.escribir("No hay tareas.\n")
            return
        for tarea in self.ordenadas():
            consola.escribir(
                f"Nombre tarea: {tarea.nombre} Prioridad: {tarea.prioridad}\n"
            )