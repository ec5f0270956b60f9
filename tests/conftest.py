import pytest


@pytest.fixture
def raw_headers():
    """Fixture providing a mixed-case header dictionary."""
    return {
        "Content-Type": ["foo"],
        "Content-Length": ["3"],
    }


@pytest.fixture
def colliding_headers():
    """Fixture providing two names that differ only in case."""
    return {
        "Content-Type": ["foo"],
        "cOnTenT-tYpE": ["foo"],
    }
