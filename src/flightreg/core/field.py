"""
Campo de formulario.

Un campo guarda un valor tipado, el texto de su pregunta y como máximo un
validador. El valor None representa un campo vacío.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from flightreg.core.exceptions import ValidatorAlreadySetError
from flightreg.core.validators import FieldValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FieldStatus(Enum):
    """Estado de un campo."""
    EMPTY = "empty"        # Nunca recibió un valor
    PENDING = "pending"    # Tiene valor, sin validar desde la última lectura
    VALID = "valid"
    INVALID = "invalid"


class InputSource(ABC):
    """Origen de los valores que ingresa el usuario."""

    @abstractmethod
    def read_value(self, prompt: str, parse: Callable[[str], T]) -> Optional[T]:
        """
        Pregunta por un valor y lo convierte con parse.

        Returns:
            Valor convertido, o None si el texto no se pudo convertir
        """
        pass


class Field(Generic[T]):
    """Campo con valor de tipo T y validador opcional."""

    def __init__(self, key: str, prompt: str, parse: Callable[[str], T] = str):
        self.key = key
        self.prompt = prompt
        self.parse = parse
        self.value: Optional[T] = None
        self.validator: Optional[FieldValidator] = None
        self.error: str = ""
        # None = sin validar todavía
        self._valid: Optional[bool] = None

    def __repr__(self) -> str:
        return f"Field({self.key!r}, value={self.value!r}, status={self.status.value})"

    @property
    def is_empty(self) -> bool:
        return self.value is None

    @property
    def is_valid(self) -> bool:
        return self._valid is True

    @property
    def needs_input(self) -> bool:
        """True si el campo está vacío o no es válido."""
        return self.is_empty or not self.is_valid

    @property
    def status(self) -> FieldStatus:
        if self._valid is None:
            return FieldStatus.EMPTY if self.is_empty else FieldStatus.PENDING
        return FieldStatus.VALID if self._valid else FieldStatus.INVALID

    def add_validator(self, validator: FieldValidator) -> None:
        """
        Asigna el validador del campo.

        Raises:
            ValidatorAlreadySetError: Si el campo ya tiene validador
        """
        if self.validator is not None:
            raise ValidatorAlreadySetError(self.key)
        self.validator = validator

    def read_input(self, source: InputSource) -> None:
        """Lee un valor nuevo y reemplaza el actual. No valida."""
        self.value = source.read_value(self.prompt, self.parse)
        logger.debug("Campo %s leído: %r", self.key, self.value)

    def validate(self) -> bool:
        """
        Valida el valor actual con el validador del campo.

        Un campo sin validador siempre es válido, incluso vacío. Un campo
        vacío con validador es inválido.
        """
        if self.validator is None:
            valid = True
        elif self.is_empty:
            valid = False
        else:
            valid = self.validator.validate(self.value)

        self._valid = valid
        if valid:
            self.error = ""
        elif self.is_empty:
            self.error = "Missing value"
        else:
            self.error = self.validator.error_message

        logger.debug("Campo %s validado: %s", self.key, valid)
        return valid

    def invalidate(self, message: str) -> None:
        """
        Marca el campo como inválido (usado por validadores de formulario).

        Si el campo ya era inválido se conserva su propio mensaje.
        """
        if self._valid is not False:
            self.error = message
        self._valid = False

    def display_value(self) -> str:
        """Texto del valor actual (vacío si no hay valor)."""
        return "" if self.value is None else str(self.value)

    def render(self) -> str:
        """
        Texto del campo: pregunta, valor y error si la última validación falló.
        """
        text = f"{self.prompt}\n{self.display_value()}"
        if self._valid is False:
            text += f"\n  >> {self.error}"
        return text

    def __str__(self) -> str:
        return self.render()
