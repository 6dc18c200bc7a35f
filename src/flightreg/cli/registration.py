"""
Formulario de registro de vuelo: armado y ciclo de llenado/validación.
"""

import logging
from datetime import date
from typing import Callable, Optional

from flightreg.cli.terminal import parse_int, parse_text, parse_uint32
from flightreg.cli.theme import print_banner, print_form
from flightreg.core import (
    DESTINATION_NAMES,
    FLIGHT_TIMES,
    WIFI_BUNDLES,
    DestinationToFlightTimeValidator,
    DestinationToWifiBundleValidator,
    Field,
    Form,
    IdValidator,
    InputSource,
    NoDigitValidator,
    RangeValidator,
)

logger = logging.getLogger(__name__)

MIN_AGE = 15
MAX_AGE = 120

WELCOME_MESSAGE = (
    "+----------------------------------------------------------+\n"
    "|                  Hello and welcome!                      |\n"
    "|  In order to register please fill in the fields below    |\n"
    "+----------------------------------------------------------+\n"
)

ERROR_MESSAGE = (
    "+----------------------------------------------------------+\n"
    "|     There was an error in at least one of the fields!    |\n"
    "|                Please correct the error(s)               |\n"
    "+----------------------------------------------------------+\n"
)

GOODBYE_MESSAGE = (
    "+----------------------------------------------------------+\n"
    "|                      Thank you!                          |\n"
    "|               This is the data you sent:                 |\n"
    "+----------------------------------------------------------+\n"
)


def current_year() -> int:
    """Año actual según el reloj del sistema."""
    return date.today().year


def build_registration_form(
    year: int,
    min_age: int = MIN_AGE,
    max_age: int = MAX_AGE,
) -> Form:
    """
    Arma el formulario de registro con sus campos y validadores.

    Args:
        year: Año actual (define el rango de año de nacimiento)
        min_age: Edad mínima
        max_age: Edad máxima

    Returns:
        Formulario vacío listo para llenar
    """
    name_field = Field("name", "What is your name?", parse_text)
    id_field = Field("id", "What is your ID?", parse_uint32)
    year_of_birth_field = Field("year_of_birth", "What is your year of birth?", parse_int)
    destination_field = Field(
        "destination",
        "What is your flight destination?\n" + DESTINATION_NAMES.values_and_names(),
        DESTINATION_NAMES.parse,
    )
    flight_time_field = Field(
        "flight_time",
        "What is your desired flight time range?\n" + FLIGHT_TIMES.values_and_names(),
        FLIGHT_TIMES.parse,
    )
    wifi_bundle_field = Field(
        "wifi_bundle",
        "What is your desired WIFI bundle?\n" + WIFI_BUNDLES.values_and_names(),
        WIFI_BUNDLES.parse,
    )

    name_field.add_validator(NoDigitValidator())
    id_field.add_validator(IdValidator())
    year_of_birth_field.add_validator(RangeValidator(year - max_age, year - min_age))
    destination_field.add_validator(RangeValidator(DESTINATION_NAMES.first, DESTINATION_NAMES.last))
    flight_time_field.add_validator(RangeValidator(FLIGHT_TIMES.first, FLIGHT_TIMES.last))
    wifi_bundle_field.add_validator(RangeValidator(WIFI_BUNDLES.first, WIFI_BUNDLES.last))

    form = Form()
    form.add_field(name_field)
    form.add_field(id_field)
    form.add_field(year_of_birth_field)
    form.add_field(destination_field)
    form.add_field(flight_time_field)
    form.add_field(wifi_bundle_field)

    form.add_validator(DestinationToFlightTimeValidator(destination_field, flight_time_field))
    form.add_validator(DestinationToWifiBundleValidator(destination_field, wifi_bundle_field))

    return form


def run_registration(
    form: Form,
    source: InputSource,
    clear: Optional[Callable[[], None]] = None,
) -> int:
    """
    Llena el formulario hasta que sea válido y muestra el resumen.

    Args:
        form: Formulario armado
        source: Origen de los valores
        clear: Función para limpiar la pantalla (None = no limpiar)

    Returns:
        Cantidad de intentos de validación hasta quedar válido
    """
    def _clear() -> None:
        if clear is not None:
            clear()

    _clear()
    print_banner(WELCOME_MESSAGE)
    form.fill(source)

    attempts = 1
    while not form.validate():
        logger.debug("Intento %d inválido", attempts)
        _clear()
        print_banner(ERROR_MESSAGE)
        print_form(form)
        form.fill(source)
        attempts += 1

    _clear()
    print_banner(GOODBYE_MESSAGE)
    print_form(form)
    logger.info("Registro completo en %d intento(s)", attempts)
    return attempts
