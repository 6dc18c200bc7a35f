"""
CLI de flightreg - Registro interactivo de pasajeros.

Comandos:
- register: Formulario interactivo de registro
- options: Lista de destinos, franjas horarias y paquetes WIFI
"""

import logging
from typing import Optional

import typer

from flightreg.config import get_settings

app = typer.Typer(
    name="flightreg",
    help="Formulario de registro de vuelos en la terminal.",
    no_args_is_help=True,
)


def _setup_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _apply_theme(name: str) -> None:
    from flightreg.cli.theme import CLITheme, ThemeName

    try:
        theme = ThemeName(name.lower())
    except ValueError:
        valid = ", ".join(t.value for t in ThemeName)
        raise typer.BadParameter(f"Tema desconocido: {name} (válidos: {valid})")
    CLITheme.set_theme(theme)


@app.command()
def register(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Tema de colores"),
    no_clear: bool = typer.Option(False, "--no-clear", help="No limpiar la pantalla"),
    year: Optional[int] = typer.Option(None, "--year", help="Año actual (por defecto, el del sistema)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Nivel de logging"),
):
    """Completa el formulario de registro de forma interactiva."""
    from flightreg.cli.registration import (
        build_registration_form,
        current_year,
        run_registration,
    )
    from flightreg.cli.terminal import ConsoleInput, clear_screen

    settings = get_settings()
    _setup_logging(log_level or settings.log_level)
    _apply_theme(theme or settings.theme)

    form = build_registration_form(
        year if year is not None else current_year(),
        min_age=settings.min_age,
        max_age=settings.max_age,
    )
    clear = clear_screen if settings.clear_screen and not no_clear else None

    run_registration(form, ConsoleInput(), clear=clear)


@app.command()
def options(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Tema de colores"),
):
    """Muestra los códigos disponibles para cada opción."""
    from flightreg.cli.theme import print_options_table
    from flightreg.core import DESTINATION_NAMES, FLIGHT_TIMES, WIFI_BUNDLES

    _apply_theme(theme or get_settings().theme)

    print_options_table(DESTINATION_NAMES, "Destinations")
    print_options_table(FLIGHT_TIMES, "Flight times")
    print_options_table(WIFI_BUNDLES, "WIFI bundles")


__all__ = [
    "app",
]
