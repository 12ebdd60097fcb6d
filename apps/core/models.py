# apps/core/models.py
import math
from django.db import models
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone


class UserProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    bio = models.TextField(blank=True)
    profile_image_url = models.URLField(max_length=500, blank=True)

    # Subskrypcja (PayPal)
    class SubscriptionTier(models.TextChoices):
        FREE = 'free', 'Free'
        TRIAL = 'trial', 'Trial'
        PREMIUM = 'premium', 'Premium'
        PAID = 'paid', 'Paid'

    subscription_tier = models.CharField(
        max_length=20,
        choices=SubscriptionTier.choices,
        default=SubscriptionTier.FREE
    )
    subscription_id = models.CharField(max_length=100, null=True, blank=True)
    trial_ends_at = models.DateTimeField(null=True, blank=True)

    # Identyfikator usera u dostawcy tożsamości (Google 'sub')
    identity_subject = models.CharField(max_length=255, null=True, blank=True, unique=True)

    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile of {self.user.username}"

    @property
    def is_subscribed(self):
        return self.subscription_tier in (self.SubscriptionTier.PREMIUM, self.SubscriptionTier.PAID)

    def trial_days_remaining(self, now=None):
        if not self.trial_ends_at:
            return 0
        now = now or timezone.now()
        seconds = (self.trial_ends_at - now).total_seconds()
        return max(0, math.ceil(seconds / 86400))


# Sygnał: Twórz profil automatycznie przy tworzeniu Usera
@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.get_or_create(user=instance)
