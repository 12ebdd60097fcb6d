# apps/core/http.py
"""Wspólne helpery dla widoków JSON API."""
import json
import logging
from functools import wraps
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def read_json(request):
    """
    Zwraca słownik z ciała żądania.
    JSON albo formularz (application/x-www-form-urlencoded); puste ciało -> {}.
    Niepoprawny JSON lub JSON niebędący obiektem -> None.
    """
    if request.content_type != 'application/json':
        return request.POST.dict()

    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        logger.warning("Invalid JSON body for %s %s", request.method, request.path)
        return None

    return data if isinstance(data, dict) else None


def wants_json(request):
    return request.content_type == 'application/json' or \
        'application/json' in request.headers.get('Accept', '')


def json_error(message, status=400, **extra):
    payload = {'message': message}
    payload.update(extra)
    return JsonResponse(payload, status=status)


def api_login_required(view_func):
    """Jak login_required, ale dla API: 401 zamiast przekierowania."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error("Not authenticated", status=401)
        return view_func(request, *args, **kwargs)
    return wrapper


def user_to_dict(user):
    profile = getattr(user, 'profile', None)
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'bio': profile.bio if profile else '',
        'profileImageUrl': profile.profile_image_url if profile else '',
        'subscriptionTier': profile.subscription_tier if profile else 'free',
        'subscriptionId': profile.subscription_id if profile else None,
        'trialEndsAt': profile.trial_ends_at.isoformat() if profile and profile.trial_ends_at else None,
        'createdAt': user.date_joined.isoformat(),
        'lastLogin': user.last_login.isoformat() if user.last_login else None,
    }


def error_messages(errors):
    """ErrorDict formularza -> {pole: [komunikaty]} (gotowe do JSON)."""
    return {
        field: [error['message'] for error in field_errors]
        for field, field_errors in errors.get_json_data().items()
    }
