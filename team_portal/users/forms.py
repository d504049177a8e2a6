from django.contrib.auth import forms as admin_forms
from django.utils.translation import gettext_lazy as _

from .models import Student


class StudentAdminChangeForm(admin_forms.UserChangeForm):
    class Meta(admin_forms.UserChangeForm.Meta):  # type: ignore[name-defined]
        model = Student
        fields = "__all__"


class StudentAdminCreationForm(admin_forms.UserCreationForm):
    """
    Form for student creation in the admin area.
    Registration is handled by staff only.
    """

    class Meta(admin_forms.UserCreationForm.Meta):  # type: ignore[name-defined]
        model = Student
        fields = ("register_number", "student_id", "name")
        field_classes = {}
        error_messages = {
            "register_number": {"unique": _("This register number has already been taken.")},
            "student_id": {"unique": _("This student id has already been taken.")},
        }
