"""Tests for ContextVar-based scan configuration.

Validates kind filtering, from_dict parsing, thread isolation and
context manager behavior.
"""

from threading import Thread

import pytest

from scsstags import (
    ScanConfig,
    TagKind,
    find_tags,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scsstags.errors import ConfigError, UnknownKindError

SOURCE = "p, .x, #y {}\n"


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_enables_all_kinds(self) -> None:
        config = ScanConfig()
        assert config.enabled_kinds == frozenset(TagKind)
        assert all(config.is_enabled(kind) for kind in TagKind)

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.enabled_kinds = frozenset()  # type: ignore[misc]


class TestFromDict:
    """ScanConfig.from_dict parsing."""

    def test_letters(self) -> None:
        config = ScanConfig.from_dict({"kinds": "ci"})
        assert config.enabled_kinds == {TagKind.CLASS, TagKind.ID}

    def test_names_and_letters(self) -> None:
        config = ScanConfig.from_dict({"kinds": ["selector", "i"]})
        assert config.enabled_kinds == {TagKind.SELECTOR, TagKind.ID}

    def test_empty_letters_disable_everything(self) -> None:
        assert ScanConfig.from_dict({"kinds": ""}).enabled_kinds == frozenset()

    def test_missing_key_gives_default(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_unknown_keys_ignored(self) -> None:
        assert ScanConfig.from_dict({"verbose": True}) == ScanConfig()

    def test_unknown_letter_raises(self) -> None:
        with pytest.raises(UnknownKindError) as exc_info:
            ScanConfig.from_dict({"kinds": "cx"})
        assert exc_info.value.kind == "x"

    def test_unknown_name_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig.from_dict({"kinds": ["mixin"]})

    @pytest.mark.parametrize("kinds", [5, 1.5, True])
    def test_non_iterable_kinds_is_config_error(self, kinds: object) -> None:
        """A kinds value that is neither letters nor names raises ConfigError."""
        with pytest.raises(ConfigError, match="kinds must be"):
            ScanConfig.from_dict({"kinds": kinds})


class TestKindFiltering:
    """Disabled kinds are dropped from the output."""

    @pytest.mark.parametrize(
        "letters,expected",
        [
            ("csi", ["p", "x", "y"]),
            ("c", ["x"]),
            ("s", ["p"]),
            ("i", ["y"]),
            ("", []),
        ],
    )
    def test_explicit_config(self, letters: str, expected: list[str]) -> None:
        config = ScanConfig.from_dict({"kinds": letters})
        assert [tag.name for tag in find_tags(SOURCE, config=config)] == expected

    def test_filtering_does_not_change_state(self) -> None:
        """A disabled declaration still opens its rule body."""
        config = ScanConfig.from_dict({"kinds": "c"})
        tags = find_tags("p { .inside: 1; }\n.out {}\n", config=config)
        assert [tag.name for tag in tags] == ["out"]

    def test_context_config(self) -> None:
        with scan_config_context(ScanConfig.from_dict({"kinds": "i"})):
            assert [tag.name for tag in find_tags(SOURCE)] == ["y"]
        assert len(find_tags(SOURCE)) == 3

    def test_explicit_config_wins_over_context(self) -> None:
        with scan_config_context(ScanConfig.from_dict({"kinds": "i"})):
            tags = find_tags(SOURCE, config=ScanConfig())
        assert len(tags) == 3


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_set_and_reset(self) -> None:
        custom = ScanConfig.from_dict({"kinds": "s"})
        set_scan_config(custom)
        try:
            assert get_scan_config() is custom
        finally:
            reset_scan_config()
        assert get_scan_config() == ScanConfig()

    def test_context_manager_restores_on_error(self) -> None:
        before = get_scan_config()
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig.from_dict({"kinds": "c"})):
                raise RuntimeError("boom")
        assert get_scan_config() is before

    def test_thread_isolation(self) -> None:
        """Setting config in another thread does not leak into this one."""
        before = get_scan_config()

        def worker() -> None:
            set_scan_config(ScanConfig.from_dict({"kinds": "c"}))

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert get_scan_config() is before
