import uuid
from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import StudentManager


class Student(AbstractUser):
    """
    Custom user model for the Team Portal.
    Students log in with their register number instead of a username.
    Uses UUID as primary key.

    The password is stored as a salted hash by Django's password hashers.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    register_number = models.CharField(
        _("register number"),
        max_length=32,
        unique=True,
        help_text=_("Identifier used to log in"),
    )
    student_id = models.CharField(
        _("student id"),
        max_length=32,
        unique=True,
        help_text=_("Institutional student identifier"),
    )
    name = models.CharField(_("name"), max_length=255, blank=True)
    email = models.EmailField(_("email address"), blank=True)
    department = models.CharField(_("department"), max_length=100, blank=True)
    section = models.CharField(_("section"), max_length=20, blank=True)

    # Set once when the student creates or joins a team.
    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="members",
        verbose_name=_("team"),
    )

    username = None  # type: ignore[assignment]
    first_name = None  # type: ignore[assignment]
    last_name = None  # type: ignore[assignment]

    USERNAME_FIELD = "register_number"
    REQUIRED_FIELDS = ["student_id", "name"]

    objects: ClassVar[StudentManager] = StudentManager()

    class Meta:
        verbose_name = _("student")
        verbose_name_plural = _("students")
        ordering = ["register_number"]

    def __str__(self) -> str:
        return f"{self.name or self.register_number} ({self.student_id})"

    def get_full_name(self) -> str:
        return self.name or self.register_number

    def get_short_name(self) -> str:
        return self.get_full_name()
