"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from rich.text import Text

from flightreg.cli.theme.palette import get_palette
from flightreg.core import Field, FieldStatus


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_banner(text: str) -> Text:
    """Banner con recuadro ASCII (el texto se respeta tal cual)."""
    p = get_palette()
    return Text(text.rstrip("\n"), style=f"bold {p.primary}")


def styled_field(field: Field) -> Text:
    """
    Campo con el mismo contenido que Field.render(), coloreado.

    La pregunta va en el color normal, el valor resaltado y el error (si
    la última validación falló) en rojo.
    """
    p = get_palette()
    text = Text()
    text.append(f"{field.prompt}\n")
    text.append(field.display_value(), style=f"bold {p.accent}")
    if field.status != FieldStatus.INVALID:
        return text
    text.append(f"\n  >> {field.error}", style=p.error)
    return text
