"""
Pytest configuration for Django app tests.
"""

from decimal import Decimal

from django.test import Client as DjangoClient

import pytest

from apps.web.menu.models import MenuItem
from apps.web.menu.tests.factories import MenuItemFactory


@pytest.fixture
def api_client() -> DjangoClient:
    """Django test client for API requests."""
    return DjangoClient()


@pytest.fixture
def classic_burger(db) -> MenuItem:
    """Menu item priced at 12.99."""
    return MenuItemFactory(name="Classic Burger", price=Decimal("12.99"))


@pytest.fixture
def veggie_burger(db) -> MenuItem:
    """Menu item priced at 11.99."""
    return MenuItemFactory(name="Veggie Burger", price=Decimal("11.99"))


@pytest.fixture
def fries(db) -> MenuItem:
    """Menu item priced at 4.50."""
    return MenuItemFactory(name="Fries", price=Decimal("4.50"))
