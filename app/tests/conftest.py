import pytest

from localization import factory


@pytest.fixture(autouse=True)
def fresh_default_registry():
    """Give every test its own process-wide registry."""
    factory.reset_default_registry()
    yield
    factory.reset_default_registry()
