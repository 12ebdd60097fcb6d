import logging
from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from apps.core.http import api_login_required, error_messages, json_error, read_json, user_to_dict
from apps.core.models import UserProfile
from .forms import SubscriptionUpdateForm
from .services import SubscriptionService

logger = logging.getLogger(__name__)


@login_required
def subscription_page_view(request):
    profile = request.user.profile
    return render(request, 'subscriptions/subscription.html', {
        'profile': profile,
        'paypal_client_id': settings.PAYPAL_CLIENT_ID,
        'paypal_plan_id': settings.PAYPAL_PLAN_ID,
        'trial_days_remaining': profile.trial_days_remaining(),
    })


@require_http_methods(["POST"])
@api_login_required
def subscription_api_view(request):
    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    form = SubscriptionUpdateForm(data)
    if not form.is_valid():
        return json_error("Invalid subscription data", errors=error_messages(form.errors))

    SubscriptionService().update_subscription(
        request.user,
        form.cleaned_data['subscriptionTier'],
        form.cleaned_data['subscriptionId'],
    )
    request.user.profile.refresh_from_db()
    return JsonResponse(user_to_dict(request.user))


@csrf_exempt
@require_http_methods(["POST"])
def paypal_webhook_view(request):
    event = read_json(request)
    if not event:
        return JsonResponse({'error': 'Invalid webhook payload'}, status=400)

    resource = event.get('resource') or {}
    try:
        user_id = int(str(resource.get('custom_id')).strip())
    except (TypeError, ValueError):
        return JsonResponse({'error': 'Invalid user ID in webhook payload'}, status=400)

    profile = UserProfile.objects.filter(user_id=user_id).first()
    if profile is None:
        return JsonResponse({'error': 'User not found'}, status=404)

    try:
        SubscriptionService().handle_webhook_event(profile, event.get('event_type'))
    except Exception:
        logger.exception("PayPal webhook failed for user %s", user_id)
        return JsonResponse({'error': 'Webhook handler failed'}, status=500)

    return JsonResponse({'received': True})
