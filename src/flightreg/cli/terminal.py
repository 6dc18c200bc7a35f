"""
Utilidades de terminal: limpiar pantalla y leer valores del usuario.
"""

import logging
import os
from typing import Callable, Optional, TypeVar

import questionary
import typer
from questionary import Style

from flightreg.cli.theme import get_palette, print_warning
from flightreg.core import InputSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

UINT32_MAX = 0xFFFFFFFF


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


def get_form_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
    ])


# =============================================================================
# CONVERSORES DE TEXTO
# =============================================================================

def parse_text(text: str) -> str:
    """Texto libre sin espacios en los extremos."""
    return text.strip()


def parse_int(text: str) -> int:
    """Entero con signo."""
    return int(text.strip())


def parse_uint32(text: str) -> int:
    """
    Entero sin signo de 32 bits.

    Raises:
        ValueError: Si no es entero o está fuera de [0, 2^32 - 1]
    """
    value = int(text.strip())
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"Fuera de rango: {value}")
    return value


class ConsoleInput(InputSource):
    """Lee valores desde la terminal con questionary."""

    def __init__(self, style: Optional[Style] = None):
        self.style = style or get_form_style()

    def ask(self, prompt: str) -> str:
        """
        Pregunta un texto al usuario.

        Raises:
            typer.Exit: Si el usuario cancela (Ctrl-C)
        """
        answer = questionary.text(prompt, style=self.style).ask()
        if answer is None:
            raise typer.Exit(1)
        return answer

    def read_value(self, prompt: str, parse: Callable[[str], T]) -> Optional[T]:
        text = self.ask(prompt)
        try:
            return parse(text)
        except ValueError:
            logger.debug("Valor no convertible: %r", text)
            print_warning(f"Invalid value: {text!r}")
            return None
