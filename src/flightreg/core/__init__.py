"""Modelo de formulario: campos, validadores y enumeraciones con nombre."""

from flightreg.core.names import (
    ValueNames,
    NamedValue,
    DESTINATION_NAMES,
    FLIGHT_TIMES,
    WIFI_BUNDLES,
)
from flightreg.core.validators import (
    FieldValidator,
    RangeValidator,
    NoDigitValidator,
    IdValidator,
)
from flightreg.core.field import Field, FieldStatus, InputSource
from flightreg.core.cross import (
    FormValidator,
    CompatibilityValidator,
    DestinationToFlightTimeValidator,
    DestinationToWifiBundleValidator,
)
from flightreg.core.form import Form, SEPARATOR
from flightreg.core.exceptions import FormError, ValidatorAlreadySetError

__all__ = [
    # Enumeraciones
    "ValueNames",
    "NamedValue",
    "DESTINATION_NAMES",
    "FLIGHT_TIMES",
    "WIFI_BUNDLES",
    # Validadores de campo
    "FieldValidator",
    "RangeValidator",
    "NoDigitValidator",
    "IdValidator",
    # Campo
    "Field",
    "FieldStatus",
    "InputSource",
    # Validadores de formulario
    "FormValidator",
    "CompatibilityValidator",
    "DestinationToFlightTimeValidator",
    "DestinationToWifiBundleValidator",
    # Formulario
    "Form",
    "SEPARATOR",
    # Errores
    "FormError",
    "ValidatorAlreadySetError",
]
