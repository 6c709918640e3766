"""Tests for menu models."""

from decimal import Decimal

import pytest

from apps.web.menu.models import MenuItem

from .factories import MenuItemFactory


@pytest.mark.django_db
class TestMenuItem:
    """Tests for MenuItem model."""

    def test_create_item(self) -> None:
        """Test creating a menu item."""
        item = MenuItemFactory(name="Classic Burger", price=Decimal("12.99"))

        assert item.pk is not None
        assert item.name == "Classic Burger"
        assert item.price == Decimal("12.99")
        assert item.created_at is not None

    def test_item_str(self) -> None:
        """Test item string representation."""
        item = MenuItemFactory(name="Veggie Burger")

        assert str(item) == "Veggie Burger"

    def test_items_ordered_by_name(self) -> None:
        """Test menu items are ordered alphabetically."""
        fries = MenuItemFactory(name="Fries")
        burger = MenuItemFactory(name="Burger")

        assert list(MenuItem.objects.all()) == [burger, fries]

    def test_optional_fields_default_blank(self) -> None:
        """Test description and links are optional."""
        item = MenuItem.objects.create(name="Water", price=Decimal("0.00"))

        assert item.description == ""
        assert item.image_url == ""
        assert item.qr_code_link == ""
