from unittest import mock
import pytest
from django.test import Client
from apps.core.models import UserProfile
from apps.reports.models import UserActivity

pytestmark = pytest.mark.django_db


def webhook(user_id, event_type):
    client = Client(enforce_csrf_checks=True)
    return client.post('/api/webhooks/paypal', {
        'event_type': event_type,
        'resource': {'custom_id': str(user_id)},
    }, content_type='application/json')


def test_update_subscription(auth_client, user):
    response = auth_client.post('/api/user/subscription', {
        'subscriptionId': 'I-SUB123', 'subscriptionTier': 'premium'
    }, content_type='application/json')

    assert response.status_code == 200
    assert response.json()['subscriptionTier'] == 'premium'
    assert response.json()['subscriptionId'] == 'I-SUB123'
    user.profile.refresh_from_db()
    assert user.profile.is_subscribed
    assert UserActivity.objects.filter(user=user, activity_type='subscription_updated').exists()


def test_update_subscription_rejects_unknown_tier(auth_client):
    response = auth_client.post('/api/user/subscription', {'subscriptionTier': 'gold'},
                                content_type='application/json')
    assert response.status_code == 400
    assert 'subscriptionTier' in response.json()['errors']


def test_update_subscription_requires_login(client):
    response = client.post('/api/user/subscription', {'subscriptionTier': 'premium'},
                           content_type='application/json')
    assert response.status_code == 401


@pytest.mark.parametrize('event_type', ['BILLING.SUBSCRIPTION.CANCELLED', 'BILLING.SUBSCRIPTION.SUSPENDED'])
def test_webhook_cancels(user, event_type):
    UserProfile.objects.filter(user=user).update(subscription_tier='premium', subscription_id='I-SUB123')

    response = webhook(user.id, event_type)

    assert response.status_code == 200
    assert response.json() == {'received': True}
    user.profile.refresh_from_db()
    assert user.profile.subscription_tier == 'free'
    assert user.profile.subscription_id is None


def test_webhook_payment_completed(user):
    webhook(user.id, 'PAYMENT.SALE.COMPLETED')
    user.profile.refresh_from_db()
    assert user.profile.subscription_tier == 'premium'


def test_webhook_ignores_other_events(user):
    response = webhook(user.id, 'BILLING.SUBSCRIPTION.CREATED')
    assert response.json() == {'received': True}
    user.profile.refresh_from_db()
    assert user.profile.subscription_tier == 'free'


def test_webhook_invalid_user_id(db):
    response = webhook('not-a-number', 'PAYMENT.SALE.COMPLETED')
    assert response.status_code == 400
    assert response.json() == {'error': 'Invalid user ID in webhook payload'}


def test_webhook_unknown_user(db):
    assert webhook(9999, 'PAYMENT.SALE.COMPLETED').status_code == 404


def test_webhook_handler_failure(user):
    with mock.patch('apps.subscriptions.views.SubscriptionService.handle_webhook_event',
                    side_effect=RuntimeError('db down')):
        response = webhook(user.id, 'PAYMENT.SALE.COMPLETED')

    assert response.status_code == 500
    assert response.json() == {'error': 'Webhook handler failed'}


def test_subscription_page(auth_client, settings):
    settings.PAYPAL_CLIENT_ID = 'client-123'
    settings.PAYPAL_PLAN_ID = 'P-PLAN'

    response = auth_client.get('/subscription/')

    assert response.status_code == 200
    assert response.context['paypal_plan_id'] == 'P-PLAN'
    assert b'client-id=client-123' in response.content


def test_subscription_page_requires_login(client):
    assert client.get('/subscription/').status_code == 302
