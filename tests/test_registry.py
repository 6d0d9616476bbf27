from __future__ import annotations

import logging

from cssvars import Registry


def test_get_returns_last_registered_value() -> None:
    registry = Registry()
    registry.register("main", "green")
    registry.register("main", "blue")

    assert registry.get("main") == "blue"
    assert registry.get("missing") is None


def test_names_with_prefixes_address_the_same_variable() -> None:
    registry = Registry()
    registry.register("--main", "green")

    assert registry.get("main") == "green"
    assert registry.get("$main") == "green"
    assert "--main" in registry
    assert list(registry) == ["main"]


def test_overwrite_keeps_original_position() -> None:
    registry = Registry()
    registry.register("main", "green")
    registry.register("contrast", "red")
    registry.register("main", "blue")

    assert list(registry.items()) == [("main", "blue"), ("contrast", "red")]


def test_boolean_and_none_values_are_stored() -> None:
    registry = Registry()
    registry.register("flag", False)
    registry.register("main", "green")
    registry.register("main", None)

    assert registry.get("flag") == "false"
    assert registry.get("main") == ""
    assert [(d.property, d.value) for d in registry.emit_root()] == [("--flag", "false"), ("--main", "")]


def test_unregister_removes_variable() -> None:
    registry = Registry({"main": "green", "contrast": "red"})

    assert registry.unregister("--main") is True
    assert registry.unregister("other") is False
    assert "main" not in registry
    assert list(registry) == ["contrast"]


def test_names_with_configured_prefix_are_found() -> None:
    registry = Registry({"main": "green"}, options={"prefix": "--app-"})

    assert registry.get("--app-main") == "green"
    assert "--app-main" in registry
    assert registry.get("--main") == "green"
    assert registry.custom_property("--app-main") == "--app-main"


def test_update_merges_in_order() -> None:
    registry = Registry([("main", "green")])
    registry.update({"contrast": "red", "main": (0, 128, 0), "gap": 4})

    assert list(registry.items()) == [
        ("main", "rgb(0, 128, 0)"),
        ("contrast", "red"),
        ("gap", "4"),
    ]


def test_emit_root_one_declaration_per_name() -> None:
    registry = Registry()
    registry.register("main", "green")
    registry.register("contrast", "red")
    registry.register("main", "olive")

    rule = registry.emit_root()

    assert rule.selector == ":root"
    assert [(d.property, d.value) for d in rule] == [("--main", "olive"), ("--contrast", "red")]
    assert str(rule) == ":root {\n  --main: olive;\n  --contrast: red;\n}"


def test_emit_root_is_idempotent() -> None:
    registry = Registry({"main": "green", "contrast": "red"})

    assert str(registry.emit_root()) == str(registry.emit_root())


def test_emit_root_ignores_later_registrations() -> None:
    registry = Registry({"main": "green"})
    rule = registry.emit_root()
    registry.register("contrast", "red")

    assert len(rule) == 1
    assert len(registry.emit_root()) == 2


def test_emit_root_uses_options() -> None:
    registry = Registry({"main": "green"}, options={"root": "html", "prefix": "--app-", "indent": "\t"})

    assert str(registry.emit_root()) == "html {\n\t--app-main: green;\n}"
    assert str(registry.emit_root(".dark")) == ".dark {\n\t--app-main: green;\n}"


def test_empty_registry_emits_empty_root() -> None:
    assert str(Registry().emit_root()) == ":root {\n}"


def test_var_skips_absent_fallbacks() -> None:
    registry = Registry()

    assert registry.var("main") == "var(--main)"
    assert registry.var("main", None, "tomato") == "var(--main, tomato)"


def test_overwrite_is_logged(caplog) -> None:
    registry = Registry({"main": "green"})
    with caplog.at_level(logging.DEBUG, logger="cssvars.registry"):
        registry.register("main", "blue")

    assert "Overwriting variable main" in caplog.text
