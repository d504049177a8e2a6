import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from django_fsm import can_proceed

from team_portal.core.models import ApprovalState

from .models import WorkLog

logger = logging.getLogger(__name__)


@admin.register(WorkLog)
class WorkLogAdmin(admin.ModelAdmin):
    list_display = ["student", "team", "date", "mentor_status", "created"]
    list_filter = ["mentor_status", "date"]
    search_fields = ["student__student_id", "student__name", "expected_task", "completed_task"]
    # mentor_status is protected: decisions go through the actions below
    readonly_fields = ["mentor_status", "created", "modified"]
    raw_id_fields = ["student", "team"]
    actions = ["approve_logs", "reject_logs"]

    def _decide(self, request, queryset, target: ApprovalState):
        decided = 0
        for log in queryset:
            transition = log.approve if target == ApprovalState.APPROVED else log.reject
            if not can_proceed(transition):
                continue
            transition()
            log.save()
            decided += 1
        logger.info("%s marked %d work log(s) as %s", request.user, decided, target)
        return decided

    @admin.action(description=_("Approve selected work logs"))
    def approve_logs(self, request, queryset):
        decided = self._decide(request, queryset, ApprovalState.APPROVED)
        self.message_user(request, _("%d work log(s) approved.") % decided)

    @admin.action(description=_("Reject selected work logs"))
    def reject_logs(self, request, queryset):
        decided = self._decide(request, queryset, ApprovalState.REJECTED)
        self.message_user(request, _("%d work log(s) rejected.") % decided)
