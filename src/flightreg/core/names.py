"""
Enumeraciones de valores con nombre.

Cada tabla asocia códigos enteros pequeños (1, 2, 3, ...) a un nombre
legible. Los valores leídos del usuario se guardan como NamedValue, que
conserva el código aunque no exista en la tabla: así un RangeValidator
genérico puede rechazar códigos fuera de rango en cualquier tabla.
"""

from functools import total_ordering
from typing import Iterator, Optional


class ValueNames:
    """Tabla fija código -> nombre."""

    def __init__(self, kind: str, names: list[str]):
        self.kind = kind
        # Códigos contiguos empezando en 1
        self._names = {code: name for code, name in enumerate(names, start=1)}

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[int]:
        return iter(self._names)

    def __contains__(self, code: object) -> bool:
        return code in self._names

    def __repr__(self) -> str:
        return f"ValueNames({self.kind!r}, {list(self._names.values())!r})"

    @property
    def first(self) -> int:
        return 1

    @property
    def last(self) -> int:
        return len(self._names)

    def name_of(self, code: int) -> Optional[str]:
        """Retorna el nombre del código o None si no está en la tabla."""
        return self._names.get(code)

    def values_and_names(self) -> str:
        """
        Listado multilínea "código - nombre" para mostrar en el prompt.

        Returns:
            Una línea por código, en orden ascendente
        """
        return "\n".join(f"{code} - {name}" for code, name in self._names.items())

    def value(self, code: int) -> "NamedValue":
        """Crea un NamedValue de esta tabla."""
        return NamedValue(self, code)

    def parse(self, text: str) -> "NamedValue":
        """
        Lee un código entero desde texto.

        No valida el rango: un código inexistente se guarda igual y lo
        rechaza después el validador del campo.

        Raises:
            ValueError: Si el texto no es un entero
        """
        return NamedValue(self, int(text.strip()))


@total_ordering
class NamedValue:
    """Código de una tabla ValueNames. Se compara por código."""

    __slots__ = ("names", "code")

    def __init__(self, names: ValueNames, code: int):
        self.names = names
        self.code = int(code)

    @staticmethod
    def _code_of(other: object) -> Optional[int]:
        if isinstance(other, NamedValue):
            return other.code
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        code = self._code_of(other)
        if code is None:
            return NotImplemented
        return self.code == code

    def __lt__(self, other: object) -> bool:
        code = self._code_of(other)
        if code is None:
            return NotImplemented
        return self.code < code

    def __hash__(self) -> int:
        return hash(self.code)

    def __int__(self) -> int:
        return self.code

    @property
    def name(self) -> Optional[str]:
        return self.names.name_of(self.code)

    def __str__(self) -> str:
        # Código desconocido: se muestra el número tal cual
        name = self.name
        return name if name is not None else str(self.code)

    def __repr__(self) -> str:
        return f"NamedValue({self.names.kind!r}, {self.code})"


# =============================================================================
# TABLAS FIJAS
# =============================================================================

DESTINATION_NAMES = ValueNames(
    "destination",
    ["London", "New York", "Paris", "Tokyo", "Rome"],
)

FLIGHT_TIMES = ValueNames(
    "flight_time",
    ["Morning (06:00-12:00)", "Afternoon (12:00-18:00)", "Night (18:00-06:00)"],
)

WIFI_BUNDLES = ValueNames(
    "wifi_bundle",
    ["Basic", "Standard", "Premium"],
)
