from __future__ import annotations
from typing import Literal
from typing_extensions import TypeAliasType

__all__ = ["Color", "CSSValue", "ColorFormat", "serialize"]

ColorFormat = TypeAliasType(
    "ColorFormat",
    tuple[int, int, int]
    | tuple[int, int, int, float]
    | Literal["black", "white", "red", "green", "blue", "transparent", "currentcolor"]
    | str,
)

CSSValue = TypeAliasType(
    "CSSValue",
    str | int | float | bool | tuple[int, int, int] | tuple[int, int, int, float] | None,
)

NAMED = ["black", "white", "red", "green", "blue", "transparent", "currentcolor"]
HEX_DIGITS = "0123456789abcdefABCDEF"


class Color:
    """Helper class to build css color values."""

    @staticmethod
    def new(color: ColorFormat) -> str:
        if isinstance(color, tuple) and len(color) == 3:
            return Color.rgb(*color)
        elif isinstance(color, tuple) and len(color) == 4:
            return Color.rgba(*color)
        elif isinstance(color, str) and color.lower() in NAMED:
            return color.lower()
        elif isinstance(color, str) and color.startswith("#"):
            return Color.hex(color)
        return str(color)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> str:
        return f"rgb({r}, {g}, {b})"

    @staticmethod
    def rgba(r: int, g: int, b: int, a: float) -> str:
        return f"rgba({r}, {g}, {b}, {number(a)})"

    @staticmethod
    def hex(code: str) -> str:
        """Normalize a hex color to its lowercase 6 digit form.

        Raises:
            ValueError: When the code is not 3 or 6 hex digits.
        """
        code = code.lstrip("#")
        if len(code) not in [3, 6]:
            raise ValueError("Hex value must be 3 or 6 digits")
        if any(c not in HEX_DIGITS for c in code):
            raise ValueError(f"Invalid hex digit in '#{code}'")

        if len(code) == 3:
            code = f"{code[0]*2}{code[1]*2}{code[2]*2}"

        return f"#{code.lower()}"


def number(value: int | float) -> str:
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else format(value, "g")
    return str(value)


def serialize(value: CSSValue | object) -> str | None:
    """Convert a python value into css text.

    `None` is treated as absent and returns `None`.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return number(value)
    if isinstance(value, tuple) and len(value) in (3, 4):
        return Color.new(value)
    return str(value)
