"""
Funciones que imprimen directamente a la consola.
"""

from rich import box
from rich.table import Table

from flightreg.cli.theme.palette import get_console, get_palette
from flightreg.cli.theme.styled import (
    styled_banner, styled_error, styled_field, styled_warning,
)
from flightreg.core import Form, SEPARATOR, ValueNames


def print_separator() -> None:
    """Imprime el separador de fin de formulario."""
    console = get_console()
    p = get_palette()
    console.print(SEPARATOR, style=p.border)


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    console = get_console()
    console.print(styled_warning(text))


def print_error(text: str) -> None:
    """Imprime error."""
    console = get_console()
    console.print(styled_error(text))


def print_banner(text: str) -> None:
    """Imprime un banner con recuadro ASCII."""
    console = get_console()
    console.print(styled_banner(text))


def print_form(form: Form) -> None:
    """
    Imprime todos los campos del formulario con su valor.

    Mismo contenido que Form.render(): un bloque por campo, los errores
    de formulario y el separador final.
    """
    console = get_console()
    for i, field in enumerate(form.fields):
        if i > 0:
            console.print()
        console.print(styled_field(field))

    if form.errors:
        console.print()
        for error in form.errors:
            print_error(error)

    print_separator()


def create_options_table(names: ValueNames, title: str = None) -> Table:
    """Crea una tabla con los códigos y nombres de una enumeración."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("Code", justify="right", style=p.accent)
    table.add_column("Name", justify="left")

    for code in names:
        table.add_row(str(code), names.name_of(code))

    return table


def print_options_table(names: ValueNames, title: str = None) -> None:
    """Imprime la tabla de opciones de una enumeración."""
    console = get_console()
    console.print(create_options_table(names, title))
