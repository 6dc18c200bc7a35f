"""
Sistema de temas para la interfaz CLI de flightreg.

- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
"""

from flightreg.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from flightreg.cli.theme.styled import (
    styled_warning,
    styled_error,
    styled_banner,
    styled_field,
)

from flightreg.cli.theme.printing import (
    print_separator,
    print_warning,
    print_error,
    print_banner,
    print_form,
    create_options_table,
    print_options_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_warning",
    "styled_error",
    "styled_banner",
    "styled_field",
    # printing
    "print_separator",
    "print_warning",
    "print_error",
    "print_banner",
    "print_form",
    "create_options_table",
    "print_options_table",
]
