"""Configuración de pytest para tests de flightreg."""

import pytest

from flightreg.cli.registration import build_registration_form
from flightreg.core import InputSource

YEAR = 2026


class ScriptedInput(InputSource):
    """Origen de valores con respuestas predefinidas."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def read_value(self, prompt, parse):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Sin respuesta para: {prompt!r}")
        text = self.answers.pop(0)
        try:
            return parse(text)
        except ValueError:
            return None

    @property
    def asked_first_lines(self):
        """Primera línea de cada pregunta realizada."""
        return [p.splitlines()[0] for p in self.prompts]


@pytest.fixture
def valid_answers():
    """Respuestas válidas en el orden del formulario."""
    return ["Jane Doe", "123456782", "1990", "1", "1", "1"]


@pytest.fixture
def registration_form():
    """Formulario de registro con año fijo."""
    return build_registration_form(YEAR)


@pytest.fixture
def scripted():
    """Fábrica de ScriptedInput."""
    return ScriptedInput
