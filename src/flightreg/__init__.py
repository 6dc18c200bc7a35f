"""flightreg - Formulario de registro de vuelos en la terminal."""

__version__ = "0.1.0"
