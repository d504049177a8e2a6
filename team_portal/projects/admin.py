from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from team_portal.core.models import ApprovalState

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["title", "team", "theme", "approval", "created"]
    list_filter = ["approval", "theme", "created"]
    search_fields = ["title", "team__code", "team__team_lead__name"]
    readonly_fields = ["created", "modified"]
    raw_id_fields = ["team"]
    actions = ["approve_projects", "reject_projects"]

    @admin.action(description=_("Approve selected projects"))
    def approve_projects(self, request, queryset):
        updated = queryset.update(approval=ApprovalState.APPROVED)
        self.message_user(request, _("%d project(s) approved.") % updated)

    @admin.action(description=_("Reject selected projects"))
    def reject_projects(self, request, queryset):
        updated = queryset.update(approval=ApprovalState.REJECTED)
        self.message_user(request, _("%d project(s) rejected.") % updated)
