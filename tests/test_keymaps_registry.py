import pytest

from muks.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from muks.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    keys: tuple[str, ...] = ("g", "g"),
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.gg")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="normal.gg.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.gg"]


def test_same_keys_in_different_modes_do_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    registry.register_binding(make_binding(binding_id="insert.gg", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_register_binding_replace_drops_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    registry.register_binding(
        make_binding(binding_id="normal.gg.new"), replace=True
    )

    assert [b.id for b in registry.iter_bindings("normal")] == ["normal.gg.new"]
    assert registry.stats().binding_count == 1


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.gg"))


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_unregister_binding_bumps_revision() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))
    before = registry.revision()

    removed = registry.unregister_binding("normal.gg")

    assert removed is not None and removed.id == "normal.gg"
    assert registry.revision() > before
    assert registry.stats().modes == ()
    assert registry.unregister_binding("normal.gg") is None


def test_key_stroke_tokens_include_modifiers() -> None:
    assert KeyStroke("s", modifiers=("ctrl",)).token == "CTRL+s"
    assert KeyStroke("ESC").token == "ESC"
    with pytest.raises(ValueError):
        KeyStroke("")


def test_load_default_keymaps_registers_every_mode() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == len(DEFAULT_ACTIONS)
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert stats.modes == ("command", "insert", "normal")


def test_load_default_keymaps_can_exclude_and_extend() -> None:
    registry = KeymapRegistry()
    extra = make_binding(
        binding_id="normal.zero", keys=("0",), action_id="motion.line_start"
    )

    load_default_keymaps(
        registry, exclude_bindings=["normal.line_start"], extra_bindings=[extra]
    )

    signatures = {b.key_signature: b.id for b in registry.iter_bindings("normal")}
    assert "1" not in signatures
    assert signatures["0"] == "normal.zero"
