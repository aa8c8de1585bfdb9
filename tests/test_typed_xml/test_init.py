"""Test module for typed_xml package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    import typed_xml

    assert typed_xml is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import typed_xml

    assert isinstance(typed_xml.__version__, str)
    assert typed_xml.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    import typed_xml

    assert typed_xml.__author__ == "Typed XML Team"


def test_package_exports_resolve() -> None:
    """Test that every name in __all__ is importable from the package."""
    import typed_xml

    for name in typed_xml.__all__:
        assert hasattr(typed_xml, name), name
