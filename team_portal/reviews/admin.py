from django.contrib import admin

from .models import Review
from .models import ReviewAttachment
from .models import ReviewTemplate


class ReviewAttachmentInline(admin.TabularInline):
    model = ReviewAttachment
    extra = 0
    fields = ["attachment_name", "link", "created"]
    readonly_fields = ["created"]


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ["stage", "team", "is_completed", "completed_on", "department", "created"]
    list_filter = ["is_completed", "stage", "department"]
    search_fields = ["stage", "team__code", "result"]
    raw_id_fields = ["team"]
    inlines = [ReviewAttachmentInline]


@admin.register(ReviewAttachment)
class ReviewAttachmentAdmin(admin.ModelAdmin):
    list_display = ["attachment_name", "review", "created"]
    search_fields = ["attachment_name", "review__stage", "review__team__code"]
    raw_id_fields = ["review"]


@admin.register(ReviewTemplate)
class ReviewTemplateAdmin(admin.ModelAdmin):
    list_display = ["name", "review", "created"]
    list_filter = ["review"]
    search_fields = ["name", "description"]
