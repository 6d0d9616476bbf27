""" CSS output model

Rules and declarations as they are written out, not as they are parsed.
https://www.w3.org/TR/css-syntax-3/#declaration
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator

from cssvars.options import OptionalOptions, Options, default_options

__all__ = ["Declaration", "Rule", "Stylesheet"]

class Declaration:
    important: bool
    property: str
    value: str
    def __init__(self, property: str, value: str, *, important: bool = False):
        if property.strip() == "":
            raise ValueError("Declaration property may not be empty")
        self.property = property.strip()
        self.value = value
        self.important = important

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Declaration):
            return (
                self.property == __value.property
                and self.value == __value.value
                and self.important == __value.important
            )
        return False

    def __repr__(self) -> str:
        return f"Decl({'!, ' if self.important else ''}{self.property!r}, {self.value!r})"

    def __str__(self) -> str:
        return f"{self.property}: {self.value}{' !important' if self.important else ''};"


class Rule:
    selector: str
    declarations: list[Declaration]
    def __init__(
        self,
        selector: str,
        declarations: Iterable[Declaration] | None = None,
        *,
        options: OptionalOptions | None = None,
    ) -> None:
        self.selector = selector
        self.declarations = list(declarations or [])
        self.options: Options = default_options(options)

    def append(self, declaration: Declaration):
        self.declarations.append(declaration)

    def extend(self, declarations: Iterable[Declaration]):
        self.declarations.extend(declarations)

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def __repr__(self) -> str:
        return f"Rule({self.selector!r}, declarations={self.declarations})"

    def __str__(self) -> str:
        indent, newline = self.options["indent"], self.options["newline"]
        lines = [f"{self.selector} {{"]
        lines.extend(f"{indent}{declaration}" for declaration in self.declarations)
        lines.append("}")
        return newline.join(lines)


class Stylesheet:
    """Ordered collection of rules that renders to a single css document."""

    def __init__(self, rules: Iterable[Rule] | None = None, *, options: OptionalOptions | None = None) -> None:
        self.options: Options = default_options(options)
        self._css_rules_: list[Rule] = list(rules or [])

    @property
    def css_rules(self) -> list[Rule]:
        return self._css_rules_

    def insert_rule(self, rule: Rule, index: int = -1) -> int:
        """Insert a rule, appending it when `index` is -1.

        Returns:
            int: The index the rule was inserted at.

        Raises:
            IndexError: When `index` is outside of the current rules.
        """
        if index == -1:
            index = len(self._css_rules_)
        if index < 0 or index > len(self._css_rules_):
            raise IndexError(f"Rule index {index} out of range")
        self._css_rules_.insert(index, rule)
        return index

    def delete_rule(self, index: int):
        if index < 0 or index >= len(self._css_rules_):
            raise IndexError(f"Rule index {index} out of range")
        del self._css_rules_[index]

    def rule(self, selector: str, *declarations: Declaration) -> Rule:
        """Create a rule with this stylesheet's options and append it."""
        rule = Rule(selector, declarations, options=self.options)
        self.insert_rule(rule)
        return rule

    def write(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(self), encoding="utf-8")
        return path

    def __len__(self) -> int:
        return len(self._css_rules_)

    def __str__(self) -> str:
        newline = self.options["newline"]
        if len(self._css_rules_) == 0:
            return ""
        return (newline * 2).join(str(rule) for rule in self._css_rules_) + newline
