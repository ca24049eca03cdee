"""Tests for Tag and TagKind."""

import pytest

from scsstags.errors import ScssTagsError, UnknownKindError
from scsstags.tags import Tag, TagKind


class TestTagKind:
    """Kind metadata and lookups."""

    @pytest.mark.parametrize(
        "kind,letter,name,description",
        [
            (TagKind.CLASS, "c", "class", "classes"),
            (TagKind.SELECTOR, "s", "selector", "selectors"),
            (TagKind.ID, "i", "id", "identities"),
        ],
    )
    def test_metadata(self, kind: TagKind, letter: str, name: str, description: str) -> None:
        assert kind.letter == letter
        assert kind.kind_name == name
        assert kind.description == description
        assert TagKind.from_letter(letter) is kind
        assert TagKind.from_name(name) is kind
        assert TagKind.from_name(letter) is kind

    def test_letters_are_unique(self) -> None:
        letters = [kind.letter for kind in TagKind]
        assert len(letters) == len(set(letters))

    def test_unknown_letter(self) -> None:
        with pytest.raises(UnknownKindError, match="'z'"):
            TagKind.from_letter("z")

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownKindError):
            TagKind.from_name("classes")

    def test_unknown_kind_is_scsstags_error(self) -> None:
        assert isinstance(UnknownKindError("z"), ScssTagsError)


class TestTag:
    """Tag record behavior."""

    def test_frozen(self) -> None:
        tag = Tag("foo", TagKind.CLASS)
        with pytest.raises(AttributeError):
            tag.name = "bar"  # type: ignore[misc]

    def test_equality_includes_line(self) -> None:
        assert Tag("foo", TagKind.CLASS, 1) == Tag("foo", TagKind.CLASS, 1)
        assert Tag("foo", TagKind.CLASS, 1) != Tag("foo", TagKind.CLASS, 2)
        assert Tag("foo", TagKind.CLASS) != Tag("foo", TagKind.ID)

    def test_hashable(self) -> None:
        assert len({Tag("a", TagKind.ID), Tag("a", TagKind.ID)}) == 1

    def test_repr(self) -> None:
        assert repr(Tag("foo", TagKind.CLASS, 3)) == "Tag(CLASS, 'foo', line 3)"
