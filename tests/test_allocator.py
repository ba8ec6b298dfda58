import pytest

from svg_sprite.svg.allocator import IdentifierRegistry


def test_collision_prone_names_get_counter_suffixes() -> None:
    registry = IdentifierRegistry()
    ids = [registry.allocate(name) for name in ("Icon", "ICON", "icon ")]
    assert ids == ["icon", "icon-1", "icon-2"]


def test_fresh_registries_give_the_same_base_id() -> None:
    assert IdentifierRegistry().allocate("Arrow Left") == "arrow-left"
    assert IdentifierRegistry().allocate("Arrow Left") == "arrow-left"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("My  Cool\tIcon", "my-cool-icon"),
        ("  Padded  ", "padded"),
        ("Arrow/Left", "arrow/left"),
        ("", "symbol"),
        ("   ", "symbol"),
    ],
)
def test_sanitize_replaces_whitespace_runs(name: str, expected: str) -> None:
    assert IdentifierRegistry().sanitize(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Arrow/Left (v2)", "arrow-left-v2"),
        ("Café Icon", "caf-icon"),
        ("already-clean", "already-clean"),
        ("!!!", "symbol"),
    ],
)
def test_strict_sanitize_keeps_only_safe_characters(name: str, expected: str) -> None:
    assert IdentifierRegistry(strict=True).sanitize(name) == expected


def test_strict_mode_collides_differently_punctuated_names() -> None:
    registry = IdentifierRegistry(strict=True)
    assert registry.allocate("Icon!") == "icon"
    assert registry.allocate("icon?") == "icon-1"


def test_prefix_is_applied_before_uniqueness() -> None:
    registry = IdentifierRegistry(prefix="i-")
    assert registry.allocate("Home") == "i-home"
    assert registry.allocate("home") == "i-home-1"


def test_suffix_search_skips_ids_taken_by_other_names() -> None:
    registry = IdentifierRegistry()
    assert registry.allocate("icon") == "icon"
    assert registry.allocate("icon-1") == "icon-1"
    assert registry.allocate("icon") == "icon-2"
    assert registry.allocate("icon") == "icon-3"


def test_registry_tracks_allocations_in_order() -> None:
    registry = IdentifierRegistry()
    for name in ("b", "a", "b"):
        registry.allocate(name)
    assert len(registry) == 3
    assert "b-1" in registry
    assert "c" not in registry
    assert list(registry) == ["b", "a", "b-1"]
    assert registry.allocated == ("b", "a", "b-1")
