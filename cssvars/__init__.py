"""
References:
    - [custom properites](https://developer.mozilla.org/en-US/docs/Web/CSS/Using_CSS_custom_properties)
    - [var()](https://developer.mozilla.org/en-US/docs/Web/CSS/var)
    - [sass variables](https://sass-lang.com/documentation/variables/)
    - [libsass-python](https://sass.github.io/libsass-python/)

<registry>
    register(main, green)
</registry>
<root>
    :root {
        --main: green;
    }
</root>
<emit-property>
    background-color: green;
    background-color: var(--main, green, tomato);
</emit-property>
"""
from cssvars.options import DEFAULTS, OptionalOptions, Options, default_options
from cssvars.registry import Registry
from cssvars.rules import Declaration, Rule, Stylesheet
from cssvars.values import Color, CSSValue, serialize

__version__ = "0.1.0"

__all__ = [
    "Registry",

    "Declaration",
    "Rule",
    "Stylesheet",

    "Color",
    "CSSValue",
    "serialize",

    "Options",
    "OptionalOptions",
    "DEFAULTS",
    "default_options",
]
