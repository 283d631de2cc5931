from django.contrib import admin

from .models import AnagramPuzzle


@admin.register(AnagramPuzzle)
class AnagramPuzzleAdmin(admin.ModelAdmin):
    list_display = ("name", "storage_key", "position", "length", "pool", "updated_at")
    list_filter = ("storage_key", "length")
    search_fields = ("name", "puzzle_id", "pool")
    ordering = ("storage_key", "position")
    readonly_fields = ("puzzle_id", "created_ms", "created_at", "updated_at")
