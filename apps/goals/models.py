# apps/goals/models.py
from django.db import models
from django.conf import settings


def empty_content():
    """Pusta struktura materiałów celu (obrazy, linki, dziennik, książki)."""
    return {
        'images': [],
        'websites': [],
        'youtubeLinks': [],
        'documents': [],
        'journals': [],
        'books': [],
    }


class Goal(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goals')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    active = models.BooleanField(default=True)

    # Hierarchia (maks. 2 poziomy: cel główny -> podcel)
    # Usunięcie celu głównego usuwa też jego podcele
    parent = models.ForeignKey(
        'self',
        null=True, blank=True,
        on_delete=models.CASCADE,
        related_name='sub_goals'
    )

    content = models.JSONField(default=empty_content, blank=True)
    order = models.IntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return self.title

    @property
    def is_main_goal(self):
        return self.parent_id is None
