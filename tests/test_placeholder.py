"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import objtree

    assert objtree.__version__ is not None
    assert objtree.__version__ == "0.1.0"
