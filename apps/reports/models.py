# apps/reports/models.py
from django.db import models
from django.conf import settings


class UserActivity(models.Model):
    # Kto?
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='activities')

    # Co zrobił? (Typ akcji)
    class ActivityType(models.TextChoices):
        ACCOUNT_CREATED = 'account_created', 'Account created'
        LOGIN = 'login', 'Login'
        LOGOUT = 'logout', 'Logout'
        GOAL_CREATED = 'goal_created', 'Goal created'
        GOAL_UPDATED = 'goal_updated', 'Goal updated'
        GOAL_DELETED = 'goal_deleted', 'Goal deleted'
        TRANSCRIPTION = 'transcription', 'Transcription'
        SUBSCRIPTION_UPDATED = 'subscription_updated', 'Subscription updated'
        PAGE_VIEW = 'page_view', 'Page view'

    # Bez choices na poziomie walidacji - klient może logować własne typy
    activity_type = models.CharField(max_length=50)

    # Metadane (JSON - np. {"goalId": 3, "transcriptionId": 7, "duration": 120})
    details = models.JSONField(default=dict, blank=True)

    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='activity_user_time_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.activity_type} - {self.timestamp}"


class ProjectTracking(models.Model):
    """Czas pracy nad celem, grupowany per dzień (dla wykresów)."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    goal = models.ForeignKey('goals.Goal', on_delete=models.CASCADE, related_name='tracking')

    total_time = models.PositiveIntegerField(default=0)  # sekundy
    sessions_count = models.PositiveIntegerField(default=0)
    last_activity = models.DateTimeField(auto_now=True)
    date_grouping = models.DateField()

    class Meta:
        ordering = ['-last_activity', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'goal', 'date_grouping'], name='unique_tracking_per_day'),
        ]

    def __str__(self):
        return f"{self.goal} @ {self.date_grouping}: {self.total_time}s"
