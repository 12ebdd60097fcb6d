# apps/transcriptions/models.py
from django.db import models
from django.conf import settings


class Transcription(models.Model):
    """Wpis dziennika (dyktowany lub wpisany), z wynikiem analizy tekstu."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='transcriptions')

    # Usunięcie celu odpina wpis, nie kasuje go
    goal = models.ForeignKey(
        'goals.Goal',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='transcriptions'
    )

    content = models.TextField()
    corrected_content = models.TextField(blank=True)
    analysis = models.JSONField(default=dict, blank=True)
    goal_matches = models.JSONField(default=list, blank=True)  # lista id celów

    duration = models.PositiveIntegerField(default=0)  # sekundy nagrania
    media = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.content[:50]

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'goalId': self.goal_id,
            'content': self.content,
            'correctedContent': self.corrected_content,
            'analysis': self.analysis,
            'goalMatches': self.goal_matches,
            'duration': self.duration,
            'media': self.media,
            'createdAt': self.created_at.isoformat(),
        }
