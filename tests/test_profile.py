from datetime import timedelta
import pytest
from django.utils import timezone
from apps.core.models import UserProfile


@pytest.mark.django_db
def test_profile_created_with_user(user):
    assert user.profile.subscription_tier == UserProfile.SubscriptionTier.FREE
    assert not user.profile.is_subscribed


@pytest.mark.django_db
def test_trial_days_remaining(user):
    now = timezone.now()
    profile = user.profile

    assert profile.trial_days_remaining(now) == 0

    profile.trial_ends_at = now + timedelta(days=2, hours=1)
    assert profile.trial_days_remaining(now) == 3

    profile.trial_ends_at = now - timedelta(days=1)
    assert profile.trial_days_remaining(now) == 0
