"""Registry of variables shared between css custom properties and preprocessor output.

A registry is filled with `register`, written out once as a root block of custom
properties with `emit_root`, and read back at declaration sites with `get` or
`emit_property`. `emit_property` always produces two declarations: the resolved
value first, for consumers without custom properties, then a `var()` reference.
The later declaration wins wherever it is understood.
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Mapping

from cssvars.options import OptionalOptions, Options, default_options
from cssvars.rules import Declaration, Rule
from cssvars.values import CSSValue, serialize

__all__ = ["Registry"]

logger = logging.getLogger(__name__)

UNSET = "unset"

class Registry:
    def __init__(
        self,
        variables: Mapping[str, CSSValue] | Iterable[tuple[str, CSSValue]] | None = None,
        *,
        options: OptionalOptions | None = None,
    ) -> None:
        self.options: Options = default_options(options)
        self._variables_: dict[str, str] = {}
        if variables is not None:
            self.update(variables)

    def normalize(self, name: str) -> str:
        """Strip the custom property prefix, `--` or a sass `$` from a name."""
        name = name.strip()
        for prefix in (self.options["prefix"], "--", "$"):
            if prefix and name.startswith(prefix):
                return name[len(prefix):]
        return name

    def register(self, name: str, value: CSSValue):
        """Insert or overwrite a variable.

        Overwriting keeps the variable's original position. `None` is stored as
        an empty value, the same as interpolating sass `null`.
        """
        key = self.normalize(name)
        text = serialize(value)
        if text is None:
            text = ""

        if key in self._variables_:
            logger.debug(f"Overwriting variable {key}: {self._variables_[key]!r} -> {text!r}")
        else:
            logger.debug(f"Registered variable {key}: {text!r}")
        self._variables_[key] = text

    def update(self, variables: Mapping[str, CSSValue] | Iterable[tuple[str, CSSValue]]):
        """Register many variables in order, same as repeated `register` calls."""
        items = variables.items() if isinstance(variables, Mapping) else variables
        for name, value in items:
            self.register(name, value)

    def unregister(self, name: str) -> bool:
        """Remove a variable. Returns whether it was registered."""
        key = self.normalize(name)
        if key not in self._variables_:
            return False
        del self._variables_[key]
        logger.debug(f"Removed variable: {key}")
        return True

    def get(self, name: str) -> str | None:
        """The registered value for `name`, or `None` when it is not registered."""
        return self._variables_.get(self.normalize(name))

    def custom_property(self, name: str) -> str:
        return f"{self.options['prefix']}{self.normalize(name)}"

    def var(self, name: str, *fallbacks: CSSValue) -> str:
        """Build a `var()` reference to `name`. Absent fallbacks are skipped."""
        args = [self.custom_property(name)]
        args.extend(text for text in map(serialize, fallbacks) if text is not None)
        return f"var({', '.join(args)})"

    def emit_root(self, selector: str | None = None) -> Rule:
        """Serialize every variable, in registration order, into a root block of custom properties.

        Variables registered after this call are not included in the returned rule.
        """
        rule = Rule(selector or self.options["root"], options=self.options)
        rule.extend(
            Declaration(self.custom_property(name), value)
            for name, value in self._variables_.items()
        )
        logger.debug(f"Emitted {len(rule)} custom properties into {rule.selector!r}")
        return rule

    def emit_property(
        self,
        property: str,
        name: str,
        fallback: CSSValue = None,
    ) -> tuple[Declaration, Declaration]:
        """Emit a static and a dynamic declaration for `property`.

        Returns:
            tuple[Declaration, Declaration]: The resolved declaration followed by the
            `var()` declaration.
        """
        value = self.get(name)
        default = serialize(fallback)
        if value is not None:
            static = value
            dynamic = self.var(name, value, default)
        else:
            if default is None:
                logger.debug(f"Variable {self.normalize(name)!r} is not registered and has no fallback")
            static = default if default is not None else UNSET
            dynamic = self.var(name, default)
        return (Declaration(property, static), Declaration(property, dynamic))

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._variables_.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize(name) in self._variables_

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables_)

    def __len__(self) -> int:
        return len(self._variables_)

    def __repr__(self) -> str:
        return f"Registry({self._variables_!r})"
