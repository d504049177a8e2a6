from typing import TYPE_CHECKING

from django.contrib.auth.hashers import make_password
from django.contrib.auth.models import UserManager as DjangoUserManager

if TYPE_CHECKING:
    from .models import Student  # noqa: F401


class StudentManager(DjangoUserManager["Student"]):
    """Custom manager for the Student model, keyed on the register number."""

    def _create_user(self, register_number: str, password: str | None, **extra_fields):
        """
        Create and save a student with the given register number and password.
        """
        if not register_number:
            msg = "The given register number must be set"
            raise ValueError(msg)
        if email := extra_fields.get("email"):
            extra_fields["email"] = self.normalize_email(email)
        user = self.model(register_number=register_number, **extra_fields)
        user.password = make_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, register_number: str, password: str | None = None, **extra_fields):  # type: ignore[override]
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(register_number, password, **extra_fields)

    def create_superuser(self, register_number: str, password: str | None = None, **extra_fields):  # type: ignore[override]
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            msg = "Superuser must have is_staff=True."
            raise ValueError(msg)
        if extra_fields.get("is_superuser") is not True:
            msg = "Superuser must have is_superuser=True."
            raise ValueError(msg)

        return self._create_user(register_number, password, **extra_fields)
