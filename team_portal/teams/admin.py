from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from team_portal.core.models import ApprovalState

from .models import Team


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ["code", "team_lead", "approval", "theme", "mentor", "member_count", "created"]
    list_filter = ["approval", "theme"]
    search_fields = ["code", "team_lead__student_id", "team_lead__name", "mentor"]
    readonly_fields = ["code", "created", "modified"]
    raw_id_fields = ["team_lead"]
    ordering = ["-created"]
    actions = ["approve_teams", "reject_teams"]

    @admin.display(description=_("Members"))
    def member_count(self, obj):
        return obj.members.count()

    @admin.action(description=_("Approve selected teams"))
    def approve_teams(self, request, queryset):
        updated = queryset.update(approval=ApprovalState.APPROVED)
        self.message_user(request, _("%d team(s) approved.") % updated)

    @admin.action(description=_("Reject selected teams"))
    def reject_teams(self, request, queryset):
        updated = queryset.update(approval=ApprovalState.REJECTED)
        self.message_user(request, _("%d team(s) rejected.") % updated)
