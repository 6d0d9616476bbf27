from __future__ import annotations

import pytest

from cssvars import Color, serialize


def test_serialize_absent_value() -> None:
    assert serialize(None) is None


def test_serialize_booleans() -> None:
    assert serialize(False) == "false"
    assert serialize(True) == "true"


def test_serialize_scalars() -> None:
    assert serialize("1rem") == "1rem"
    assert serialize(4) == "4"
    assert serialize(1.0) == "1"
    assert serialize(0.5) == "0.5"


def test_serialize_color_tuples() -> None:
    assert serialize((255, 99, 71)) == "rgb(255, 99, 71)"
    assert serialize((255, 99, 71, 0.5)) == "rgba(255, 99, 71, 0.5)"


def test_color_hex_normalizes() -> None:
    assert Color.hex("#ABC") == "#aabbcc"
    assert Color.hex("ff6347") == "#ff6347"
    assert Color.new("#F00") == "#ff0000"
    assert Color.new("Green") == "green"


@pytest.mark.parametrize("code", ["#abcd", "#ggg", ""])
def test_color_hex_rejects_malformed(code: str) -> None:
    with pytest.raises(ValueError):
        Color.hex(code)
