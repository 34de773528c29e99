from django.contrib import admin

from .models import DigestEvent


@admin.register(DigestEvent)
class DigestEventAdmin(admin.ModelAdmin):
    list_display = ("when", "project", "type", "task_name", "author")
    list_filter = ("type", "when")
    search_fields = ("task_name", "project__name")
