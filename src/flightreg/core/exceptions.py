"""Errores del modelo de formulario."""


class FormError(Exception):
    """Error base de formularios y campos."""


class ValidatorAlreadySetError(FormError):
    """El campo ya tiene un validador asignado."""

    def __init__(self, key: str):
        super().__init__(f"Field '{key}' already has a validator")
        self.key = key
