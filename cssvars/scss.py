"""Feed a registry into SCSS sources compiled with libsass.

Every registered variable is declared as a sass variable (`$name`) ahead of the
source, followed by the root block of custom properties unless disabled.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Literal

import sass

from cssvars.registry import Registry

__all__ = ["CompileError", "OutputStyle", "compile", "compile_file", "format_css", "to_scss"]

logger = logging.getLogger(__name__)

OutputStyle = Literal["nested", "expanded", "compact", "compressed"]

class CompileError(Exception): pass


def to_scss(registry: Registry) -> str:
    """Declare each registered variable as a sass variable, in registration order.

    Empty values are declared as `null`.
    """
    newline = registry.options["newline"]
    return "".join(
        f"${name}: {value if value.strip() else 'null'};{newline}"
        for name, value in registry.items()
    )


def _compile_string_(source: str, output_style: OutputStyle, include_paths: Iterable[str | Path]) -> str:
    try:
        return sass.compile(
            string=source,
            output_style=output_style,
            include_paths=[str(path) for path in include_paths],
        )
    except sass.CompileError as error:
        raise CompileError(str(error)) from error


def compile(
    source: str,
    registry: Registry | None = None,
    *,
    output_style: OutputStyle = "expanded",
    include_paths: Iterable[str | Path] = (),
    emit_root: bool = True,
) -> str:
    """Compile an SCSS source with the registry's variables available as `$name`.

    Raises:
        CompileError: When libsass rejects the source.
    """
    prelude = ""
    if registry is not None:
        newline = registry.options["newline"]
        prelude = to_scss(registry)
        if emit_root:
            root = registry.emit_root()
            # libsass rejects empty custom property values
            root.declarations = [d for d in root if d.value.strip()]
            if len(root) > 0:
                prelude += f"{root}{newline}"
        logger.debug(f"Compiling scss with {len(registry)} registered variables")
    return _compile_string_(prelude + source, output_style, include_paths)


def compile_file(
    path: str | Path,
    registry: Registry | None = None,
    *,
    output_style: OutputStyle = "expanded",
    include_paths: Iterable[str | Path] = (),
    emit_root: bool = True,
) -> str:
    """Same as `compile`, reading the source from `path`. The file's directory is searched for imports."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing SCSS file: {path}")
    logger.debug(f"Compiling {path}")
    return compile(
        path.read_text(encoding="utf-8"),
        registry,
        output_style=output_style,
        include_paths=[path.parent, *include_paths],
        emit_root=emit_root,
    )


def format_css(css: str, output_style: OutputStyle = "compressed") -> str:
    """Re-emit css text in one of libsass's output styles."""
    return _compile_string_(css, output_style, ())
