from __future__ import annotations
from typing import TypedDict

__all__ = ["Options", "OptionalOptions", "DEFAULTS", "default_options"]

class Options(TypedDict):
    prefix: str
    root: str
    indent: str
    newline: str

class OptionalOptions(TypedDict, total=False):
    prefix: str
    root: str
    indent: str
    newline: str

DEFAULTS: Options = {
    "prefix": "--",
    "root": ":root",
    "indent": "  ",
    "newline": "\n",
}

def default_options(origin: OptionalOptions | dict | None = None) -> Options:
    """Fill in any missing option with its default. The given mapping is not modified."""
    options = dict(origin or {})
    for key, value in DEFAULTS.items():
        options[key] = options.get(key, value)
    return options
