"""Verify package imports work correctly."""


def test_import_texpreview() -> None:
    """Test that texpreview can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import texpreview

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert texpreview.__version__ == expected


def test_public_api() -> None:
    """Every name in __all__ resolves."""
    import texpreview

    for name in texpreview.__all__:
        assert hasattr(texpreview, name), name
