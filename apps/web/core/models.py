"""
Core models - shared model foundation.

All persisted models inherit from TimestampedModel.
"""

from django.db import models


class TimestampedModel(models.Model):
    """
    Abstract base for all persisted models.

    Provides:
    - Created/updated timestamps
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
