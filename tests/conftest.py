"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def required_fields() -> dict[str, str]:
    """Minimal valid set of required address fields."""
    return {
        "street": "Flores",
        "district": "Centro",
        "city": "São Paulo",
        "state": "SP",
        "country": "Brasil",
        "country_code": "BR",
        "zip_code": "01310100",
    }


@pytest.fixture
def all_fields(required_fields: dict[str, str]) -> dict[str, str]:
    """Valid set of every address field."""
    return {
        **required_fields,
        "type": "Rua",
        "number": "123",
        "municipality_ibge": "3550308",
        "state_ibge": "35",
        "complement": "Apto 45",
    }


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
