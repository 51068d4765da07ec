from django.db import models


class Quiz(models.Model):
    question    = models.TextField()
    answer      = models.CharField(max_length=255)
    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "quizzes"

    def __str__(self):
        return self.question


class RandomPlayGame(models.Model):
    """Random-play state of one anonymous visitor (keyed by session key)."""
    visitor_key = models.CharField(max_length=64, unique=True)
    state       = models.JSONField(default=dict)
    # compare-and-set counter, bumped on every committed write
    version     = models.PositiveIntegerField(default=1)
    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["updated_at"], name="trivia_game_updated_idx"),
        ]

    def __str__(self):
        return f"{self.visitor_key} (v{self.version})"
