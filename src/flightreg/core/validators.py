"""
Validadores de un solo campo.

Cada validador recibe el valor actual del campo y retorna True si es
válido. El mensaje de error se usa al mostrar el campo rechazado.
"""

from abc import ABC, abstractmethod
from typing import Any


class FieldValidator(ABC):
    """Validador base para el valor de un campo."""

    error_message: str = "Invalid value"

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Retorna True si el valor es válido."""
        pass

    def __call__(self, value: Any) -> bool:
        return self.validate(value)


class RangeValidator(FieldValidator):
    """
    Valida que el valor esté en el rango [low, high] (inclusive).

    Sirve para cualquier tipo ordenable: enteros y NamedValue.
    """

    def __init__(self, low: Any, high: Any):
        if high < low:
            raise ValueError(f"Rango inválido: [{low}, {high}]")
        self.low = low
        self.high = high
        self.error_message = f"Value must be between {low} and {high}"

    def validate(self, value: Any) -> bool:
        return self.low <= value <= self.high

    def __repr__(self) -> str:
        return f"RangeValidator({self.low!r}, {self.high!r})"


class NoDigitValidator(FieldValidator):
    """Valida que el texto no contenga dígitos."""

    error_message = "Can't contain digits"

    def validate(self, value: str) -> bool:
        return not any(ch.isdigit() for ch in value)


class IdValidator(FieldValidator):
    """
    Valida un número de ID por su dígito de control.

    Recorriendo de derecha a izquierda todos los dígitos menos el último,
    se multiplican alternadamente por 2 y por 1. Un producto mayor que 9
    se reemplaza por la suma de sus dígitos. El dígito de control es
    (10 - suma % 10) % 10 y debe coincidir con el último dígito del ID.

    Ejemplo: 123456782 es válido, 123456783 no.
    """

    error_message = "Wrong control digit"

    @staticmethod
    def control_digit(body: int) -> int:
        """
        Calcula el dígito de control para los dígitos previos al último.

        Args:
            body: ID sin su último dígito (ej: 12345678)

        Returns:
            Dígito de control 0-9
        """
        total = 0
        weight = 2
        while body > 0:
            body, digit = divmod(body, 10)
            product = digit * weight
            total += product - 9 if product > 9 else product
            weight = 1 if weight == 2 else 2
        return (10 - total % 10) % 10

    def validate(self, value: int) -> bool:
        if value < 0:
            return False
        body, last = divmod(value, 10)
        return self.control_digit(body) == last
