# apps/subscriptions/services.py
import logging
from apps.core.models import UserProfile
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger

logger = logging.getLogger(__name__)

CANCEL_EVENTS = ('BILLING.SUBSCRIPTION.CANCELLED', 'BILLING.SUBSCRIPTION.SUSPENDED')
PAYMENT_COMPLETED = 'PAYMENT.SALE.COMPLETED'


class SubscriptionService:
    """
    Zmiany planu usera. Sama płatność dzieje się po stronie PayPal,
    tu tylko zapisujemy jej skutek w profilu.
    """

    def update_subscription(self, user, tier: str, subscription_id=None) -> UserProfile:
        profile = user.profile
        profile.subscription_tier = tier
        profile.subscription_id = subscription_id or None
        profile.save()

        logger.info("User %s subscription updated to %s", user.id, tier)
        ActivityLogger.log(user, UserActivity.ActivityType.SUBSCRIPTION_UPDATED, {
            'subscriptionTier': tier,
            'subscriptionId': profile.subscription_id,
        })
        return profile

    def handle_webhook_event(self, profile: UserProfile, event_type: str) -> bool:
        """
        Zwraca True, jeśli zdarzenie zmieniło profil.
        Nieznane typy zdarzeń są ignorowane.
        """
        if event_type in CANCEL_EVENTS:
            profile.subscription_tier = UserProfile.SubscriptionTier.FREE
            profile.subscription_id = None
        elif event_type == PAYMENT_COMPLETED:
            profile.subscription_tier = UserProfile.SubscriptionTier.PREMIUM
        else:
            logger.debug("Ignoring PayPal event %s", event_type)
            return False

        profile.save()
        logger.info("PayPal event %s applied to user %s", event_type, profile.user_id)
        ActivityLogger.log_for_user_id(profile.user_id, UserActivity.ActivityType.SUBSCRIPTION_UPDATED, {
            'event': event_type,
            'subscriptionTier': profile.subscription_tier,
        })
        return True
