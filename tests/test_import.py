"""Verify package imports work correctly."""


def test_import_scsstags() -> None:
    """Test that scsstags can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import scsstags

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert scsstags.__version__ == expected


def test_public_api_exported() -> None:
    import scsstags

    for name in scsstags.__all__:
        assert hasattr(scsstags, name), name
