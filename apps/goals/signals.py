# apps/goals/signals.py
from django.db.models.signals import post_save, pre_delete
from django.dispatch import receiver
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger
from .models import Goal


@receiver(post_save, sender=Goal)
def log_goal_created(sender, instance, created, **kwargs):
    if created:
        ActivityLogger.log(
            instance.user,
            UserActivity.ActivityType.GOAL_CREATED,
            {'goalId': instance.id}
        )


@receiver(pre_delete, sender=Goal)
def detach_goal_from_activity(sender, instance, **kwargs):
    """
    Przed usunięciem celu (także kaskadowo jako podcel) usuwamy goalId
    ze szczegółów aktywności, żeby nie wskazywały na nieistniejący cel.
    """
    activities = UserActivity.objects.filter(user_id=instance.user_id, details__goalId=instance.id)
    for activity in activities:
        details = dict(activity.details)
        details.pop('goalId', None)
        activity.details = details
        activity.save(update_fields=['details'])
