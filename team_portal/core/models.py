import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel


class ApprovalState(models.TextChoices):
    """
    Decision state shared by team, project and work log approvals.

    Replaces the nullable boolean of the legacy tables:
        - None  -> PENDING
        - True  -> APPROVED
        - False -> REJECTED
    """

    PENDING = "pending", _("En attente")
    APPROVED = "approved", _("Approuve")
    REJECTED = "rejected", _("Rejete")

    def to_legacy(self) -> bool | None:
        """Convert the state into the legacy nullable boolean."""
        if self == ApprovalState.PENDING:
            return None
        return self == ApprovalState.APPROVED

    @property
    def is_decided(self) -> bool:
        return self != ApprovalState.PENDING


class BaseModel(TimeStampedModel):
    """
    Base model with UUID primary key and created/modified timestamps.

    All models should inherit from this class for consistency.
    Provides:
        - id: UUIDField as primary key
        - created: DateTimeField auto-set on creation
        - modified: DateTimeField auto-updated on save
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True
