from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .forms import StudentAdminChangeForm
from .forms import StudentAdminCreationForm
from .models import Student


@admin.register(Student)
class StudentAdmin(BaseUserAdmin):
    form = StudentAdminChangeForm
    add_form = StudentAdminCreationForm
    list_display = ["register_number", "student_id", "name", "department", "section", "team", "is_active"]
    list_filter = ["department", "section", "is_active", "is_staff"]
    search_fields = ["register_number", "student_id", "name", "email"]
    ordering = ["register_number"]
    raw_id_fields = ["team"]
    fieldsets = (
        (None, {"fields": ("register_number", "password")}),
        (_("Profile"), {"fields": ("student_id", "name", "email", "department", "section")}),
        (_("Team"), {"fields": ("team",)}),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("register_number", "student_id", "name", "password1", "password2"),
            },
        ),
    )
