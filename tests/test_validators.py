"""
Tests para core/validators.py - Validadores de un campo.
"""

import pytest

from flightreg.core import (
    DESTINATION_NAMES,
    IdValidator,
    NoDigitValidator,
    RangeValidator,
)


class TestRangeValidator:
    """Tests para RangeValidator."""

    def test_inside_range(self):
        """Test valores dentro del rango."""
        validator = RangeValidator(10, 20)
        for x in range(10, 21):
            assert validator.validate(x)

    def test_bounds_are_inclusive(self):
        """Test límites inclusivos."""
        validator = RangeValidator(1906, 2011)
        assert validator.validate(1906)
        assert validator.validate(2011)

    def test_outside_range(self):
        """Test valores fuera del rango."""
        validator = RangeValidator(10, 20)
        assert not validator.validate(9)
        assert not validator.validate(21)
        assert not validator.validate(-100)

    def test_named_values(self):
        """Test con NamedValue y límites enteros."""
        validator = RangeValidator(1, 5)
        assert validator.validate(DESTINATION_NAMES.value(1))
        assert validator.validate(DESTINATION_NAMES.value(5))
        assert not validator.validate(DESTINATION_NAMES.value(0))
        assert not validator.validate(DESTINATION_NAMES.value(6))

    def test_callable(self):
        """Test que el validador se puede llamar directamente."""
        assert RangeValidator(0, 1)(1)

    def test_error_message(self):
        """Test mensaje con los límites."""
        assert RangeValidator(1, 3).error_message == "Value must be between 1 and 3"

    def test_inverted_bounds(self):
        """Test rango invertido."""
        with pytest.raises(ValueError):
            RangeValidator(5, 1)


class TestNoDigitValidator:
    """Tests para NoDigitValidator."""

    @pytest.mark.parametrize("text", ["Jane Doe", "", "O'Neil-Smith", "José"])
    def test_without_digits(self, text):
        """Test textos sin dígitos."""
        assert NoDigitValidator().validate(text)

    @pytest.mark.parametrize("text", ["Jane2", "1", "R2D2", "Agent 007"])
    def test_with_digits(self, text):
        """Test textos con dígitos."""
        assert not NoDigitValidator().validate(text)


class TestIdValidator:
    """Tests para IdValidator."""

    def test_control_digit(self):
        """Test cálculo del dígito de control."""
        assert IdValidator.control_digit(12345678) == 2
        assert IdValidator.control_digit(3933307) == 5
        assert IdValidator.control_digit(0) == 0

    def test_valid_ids(self):
        """Test IDs con dígito de control correcto."""
        validator = IdValidator()
        assert validator.validate(123456782)
        assert validator.validate(39333075)
        assert validator.validate(18)

    def test_wrong_last_digit(self):
        """Test cualquier otro último dígito es inválido."""
        validator = IdValidator()
        for last in range(10):
            if last == 2:
                continue
            assert not validator.validate(12345678 * 10 + last)

    def test_leading_zeros_do_not_matter(self):
        """Test que el peso empieza por la derecha."""
        body = 1234567
        check = IdValidator.control_digit(body)
        assert IdValidator().validate(body * 10 + check)

    def test_negative(self):
        """Test ID negativo."""
        assert not IdValidator().validate(-123456782)
