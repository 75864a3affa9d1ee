"""Verify package imports work correctly."""


def test_import_charsift() -> None:
    """Test that charsift can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import charsift

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert charsift.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from charsift import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Everything in __all__ resolves to an attribute."""
    import charsift

    for name in charsift.__all__:
        assert hasattr(charsift, name), name
