"""Shared pytest fixtures and configuration for all tests."""

import pytest


@pytest.fixture
def mock_host() -> str:
    """Fixture providing a standard test API host."""
    return "http://hashicups.test"


@pytest.fixture
def mock_catalog() -> list[dict]:
    """Fixture providing a sample coffee catalog in wire format."""
    return [
        {
            "ID": 1,
            "Name": "Packer Spiced Latte",
            "Teaser": "Packed with goodness to spice up your images",
            "Price": 350,
            "Ingredient": [{"ID": 1}, {"ID": 2}, {"ID": 4}],
        },
        {
            "ID": 3,
            "Name": "Vaulatte",
            "Teaser": "Nothing gives you a safe and secure feeling like a Vaulatte",
            "Price": 200,
            "Ingredient": [{"ID": 10}, {"ID": 11}],
        },
    ]


@pytest.fixture
def mock_vaulatte_ingredients() -> list[dict]:
    """Fixture providing the canonical Vaulatte ingredients in wire format."""
    return [
        {"ID": 10, "Name": "Espresso", "Quantity": 40, "Unit": "ml"},
        {"ID": 11, "Name": "Semi Skimmed Milk", "Quantity": 300, "Unit": "ml"},
    ]
