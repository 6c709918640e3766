"""Factory classes for menu models."""

from decimal import Decimal

import factory

from apps.web.menu.models import MenuItem


class MenuItemFactory(factory.django.DjangoModelFactory):
    """Factory for MenuItem model."""

    class Meta:
        model = MenuItem

    name = factory.Sequence(lambda n: f"Item {n}")
    description = factory.Faker("sentence")
    price = factory.LazyFunction(lambda: Decimal("12.99"))
    image_url = factory.Sequence(lambda n: f"https://images.example.com/item-{n}.jpg")
    qr_code_link = factory.Sequence(lambda n: f"https://menu.example.com/item/{n}")
