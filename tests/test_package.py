"""Smoke test: verify the food_classifier package is importable."""

import food_classifier


def test_package_version() -> None:
    """Package must declare a __version__ string."""
    assert isinstance(food_classifier.__version__, str)
    assert food_classifier.__version__ == "0.0.1"
