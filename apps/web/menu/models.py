"""
Menu models - the item catalog orders are placed against.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.web.core.models import TimestampedModel


class MenuItem(TimestampedModel):
    """
    Individual menu item.

    Prices are not versioned: orders snapshot the price at order time.
    """

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    image_url = models.URLField(max_length=500, blank=True)
    qr_code_link = models.CharField(
        max_length=500,
        blank=True,
        help_text="Link printed on the item's table card",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
