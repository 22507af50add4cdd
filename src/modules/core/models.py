"""Base abstract models shared by the domain modules.

Provides ``TimestampedModel``: ``created_at`` / ``updated_at`` bookkeeping
driven by a single clock reading per save, so a freshly created row has
``created_at == updated_at``.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class TimestampedModel(models.Model):
    """Abstract base with creation / last-update timestamps."""

    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Stamp ``updated_at`` on every save and ``created_at`` on insert."""
        now = timezone.now()
        if self._state.adding and self.created_at is None:
            self.created_at = now
        self.updated_at = now

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
