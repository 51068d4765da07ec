from django.contrib import admin
from .models import Quiz, RandomPlayGame


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ("id", "question", "answer", "updated_at")
    search_fields = ("question",)


@admin.register(RandomPlayGame)
class RandomPlayGameAdmin(admin.ModelAdmin):
    list_display = ("visitor_key", "version", "created_at", "updated_at")
    readonly_fields = ("visitor_key", "state", "version", "created_at", "updated_at")
