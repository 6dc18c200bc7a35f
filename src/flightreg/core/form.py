"""
Formulario: campos ordenados más validadores entre campos.
"""

import logging
from typing import Any

from flightreg.core.cross import FormValidator
from flightreg.core.field import Field, InputSource

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 60


class Form:
    """
    Colección ordenada de campos con validadores de formulario.

    El orden de registro de los campos es el orden en que se preguntan y
    se muestran. Campos y validadores solo se agregan durante el armado.
    """

    def __init__(self):
        self.fields: list[Field] = []
        self.validators: list[FormValidator] = []
        self.errors: list[str] = []

    def add_field(self, field: Field) -> None:
        self.fields.append(field)

    def add_validator(self, validator: FormValidator) -> None:
        self.validators.append(validator)

    def get_field(self, key: str) -> Field:
        """Obtiene un campo por su key."""
        for f in self.fields:
            if f.key == key:
                return f
        raise KeyError(key)

    def fill(self, source: InputSource) -> list[Field]:
        """
        Pregunta solo los campos vacíos o inválidos.

        Returns:
            Campos que se preguntaron, en orden
        """
        asked = []
        for f in self.fields:
            if f.needs_input:
                f.read_input(source)
                asked.append(f)
        return asked

    def validate(self) -> bool:
        """
        Valida todos los campos y luego todas las reglas del formulario.

        No corta en el primer error, así el render muestra todos juntos.
        """
        results = [f.validate() for f in self.fields]

        self.errors = []
        for validator in self.validators:
            ok = validator.validate()
            results.append(ok)
            if not ok:
                self.errors.append(validator.error_message)

        valid = all(results)
        if valid:
            logger.info("Formulario válido (%d campos)", len(self.fields))
        else:
            invalid = [f.key for f in self.fields if not f.is_valid]
            logger.debug("Formulario inválido, campos: %s", ", ".join(invalid))
        return valid

    @property
    def is_valid(self) -> bool:
        """Resultado de la última validación (sin revalidar)."""
        return all(f.is_valid for f in self.fields) and not self.errors

    def values(self) -> dict[str, Any]:
        """Retorna diccionario con todos los valores."""
        return {f.key: f.value for f in self.fields}

    def render(self) -> str:
        """Texto de todos los campos, errores del formulario y separador."""
        blocks = [f.render() for f in self.fields]
        text = "\n\n".join(blocks)
        if self.errors:
            text += "\n\n" + "\n".join(f"[x] {e}" for e in self.errors)
        return f"{text}\n{SEPARATOR}"

    def __str__(self) -> str:
        return self.render()
