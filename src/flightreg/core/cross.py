"""
Validadores de formulario (entre dos campos).

Comprueban que el destino elegido sea compatible con la franja horaria y
con el paquete WIFI. Si la combinación no es válida, ambos campos quedan
marcados como inválidos para que se vuelvan a preguntar.
"""

import logging
from abc import ABC, abstractmethod

from flightreg.core.field import Field
from flightreg.core.names import NamedValue

logger = logging.getLogger(__name__)


class FormValidator(ABC):
    """Validador base sobre el estado actual del formulario."""

    error_message: str = "Fields don't match"

    @abstractmethod
    def validate(self) -> bool:
        """Retorna True si la regla se cumple."""
        pass


class CompatibilityValidator(FormValidator):
    """
    Regla de compatibilidad entre dos campos enumerados.

    La tabla asocia cada código del primer campo con el conjunto de
    códigos aceptados en el segundo. Un campo vacío hace fallar la regla.
    """

    table: dict[int, frozenset[int]] = {}

    def __init__(self, first: Field[NamedValue], second: Field[NamedValue]):
        self.first = first
        self.second = second

    def allowed(self, code: int) -> frozenset[int]:
        """Códigos del segundo campo aceptados para el código dado."""
        return self.table.get(code, frozenset())

    def is_compatible(self, first: NamedValue, second: NamedValue) -> bool:
        return int(second) in self.allowed(int(first))

    def validate(self) -> bool:
        if self.first.is_empty or self.second.is_empty:
            valid = False
        else:
            valid = self.is_compatible(self.first.value, self.second.value)

        if not valid:
            logger.debug(
                "%s falló: %s=%r, %s=%r",
                type(self).__name__,
                self.first.key, self.first.value,
                self.second.key, self.second.value,
            )
            self.first.invalidate(self.error_message)
            self.second.invalidate(self.error_message)
        return valid


class DestinationToFlightTimeValidator(CompatibilityValidator):
    """Destino vs. franja horaria del vuelo."""

    error_message = "Destination and flight time don't match"

    # Destinos lejanos (New York, Tokyo) no tienen vuelos de mañana
    table = {
        1: frozenset({1, 2, 3}),  # London
        2: frozenset({2, 3}),     # New York
        3: frozenset({1, 2, 3}),  # Paris
        4: frozenset({3}),        # Tokyo
        5: frozenset({1, 2}),     # Rome
    }


class DestinationToWifiBundleValidator(CompatibilityValidator):
    """Destino vs. paquete WIFI."""

    error_message = "Destination and WIFI bundle don't match"

    # Premium solo en vuelos largos
    table = {
        1: frozenset({1, 2}),     # London
        2: frozenset({1, 2, 3}),  # New York
        3: frozenset({1, 2}),     # Paris
        4: frozenset({2, 3}),     # Tokyo
        5: frozenset({1}),        # Rome
    }
