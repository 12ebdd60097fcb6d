import logging
from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.decorators import login_required
from django.db import connection
from django.http import HttpResponseBadRequest, JsonResponse
from django.shortcuts import render, redirect
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_http_methods
from apps.goals.domain.services import filter_sub_goals, main_goals
from apps.goals.models import Goal
from apps.quotes.domain.services import daily_quote
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger
from apps.transcriptions.models import Transcription
from .adapters.google_identity import GoogleIdentityProvider
from .forms import ForgotPasswordForm, LoginForm, RegisterForm, ResetPasswordForm, first_error
from .http import api_login_required, error_messages, json_error, read_json, user_to_dict, wants_json
from .ports.identity_provider import IdentityError, IIdentityProvider
from .services import AccountService

logger = logging.getLogger(__name__)

MODEL_BACKEND = 'django.contrib.auth.backends.ModelBackend'


def get_identity_provider() -> IIdentityProvider:
    return GoogleIdentityProvider()


def _safe_next(request, next_url):
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


@login_required
def dashboard_view(request):
    goals = list(Goal.objects.filter(user=request.user, active=True))
    roots = main_goals(goals)

    # Wybrany cel główny z ?goal=<id> (domyślnie pierwszy)
    selected = roots[0] if roots else None
    selected_id = request.GET.get('goal')
    if selected_id and selected_id.isdigit():
        selected = next((g for g in roots if g.id == int(selected_id)), selected)

    recent_entries = Transcription.objects.filter(user=request.user)[:5]

    return render(request, 'core/dashboard.html', {
        'main_goals': roots,
        'selected_goal': selected,
        'sub_goals': filter_sub_goals(goals, selected),
        'recent_entries': recent_entries,
        'quote': daily_quote(),
        'profile': request.user.profile,
    })


# ---------------------------------------------------------------
# Logowanie / sesja
# ---------------------------------------------------------------

@require_http_methods(["GET", "POST"])
def login_view(request):
    """
    GET: punkt wejścia logowania - przekierowanie do dostawcy tożsamości
    (jeśli skonfigurowany), w przeciwnym razie lokalny formularz.
    POST: logowanie loginem i hasłem (JSON albo formularz).
    """
    next_url = request.GET.get('next') or request.POST.get('next')

    if request.method == 'GET':
        provider = get_identity_provider()
        if provider.is_configured():
            authorization_url, state = provider.authorization_url()
            request.session['oauth_state'] = state
            request.session['oauth_next'] = _safe_next(request, next_url)
            return redirect(authorization_url)

        return render(request, 'core/login.html', {'form': LoginForm(), 'next': next_url or ''})

    data = read_json(request)
    as_json = wants_json(request)
    form = LoginForm(data or None)

    if not form.is_valid():
        if as_json:
            return JsonResponse({'success': False, 'message': 'Username and password are required'}, status=400)
        return render(request, 'core/login.html', {'form': form, 'next': next_url or ''}, status=400)

    user = authenticate(request, username=form.cleaned_data['username'], password=form.cleaned_data['password'])
    if user is None:
        if as_json:
            return JsonResponse({'success': False, 'message': 'Invalid credentials'}, status=401)
        form.add_error(None, "Invalid credentials")
        return render(request, 'core/login.html', {'form': form, 'next': next_url or ''}, status=401)

    login(request, user)
    ActivityLogger.log(user, UserActivity.ActivityType.LOGIN)

    if as_json:
        return JsonResponse({'success': True, 'message': 'Login successful', 'user': user_to_dict(user)})
    return redirect(_safe_next(request, next_url))


def google_callback(request):
    state = request.session.pop('oauth_state', None)
    next_url = request.session.pop('oauth_next', settings.LOGIN_REDIRECT_URL)
    if not state:
        return HttpResponseBadRequest("Missing login state")

    provider = get_identity_provider()
    try:
        identity = provider.fetch_identity(request.build_absolute_uri(), state)
        user = AccountService().login_external_identity(identity)
    except IdentityError:
        return HttpResponseBadRequest("Identity provider login failed")

    login(request, user, backend=MODEL_BACKEND)
    ActivityLogger.log(user, UserActivity.ActivityType.LOGIN, {'provider': 'google'})

    return redirect(_safe_next(request, next_url))


@require_http_methods(["POST"])
def logout_view(request):
    if request.user.is_authenticated:
        ActivityLogger.log(request.user, UserActivity.ActivityType.LOGOUT)
    logout(request)
    return JsonResponse({'message': 'Logged out successfully'})


@require_http_methods(["GET"])
@ensure_csrf_cookie
@api_login_required
def current_user_view(request):
    return JsonResponse(user_to_dict(request.user))


@require_http_methods(["POST"])
def register_view(request):
    data = read_json(request)
    if data is None:
        return json_error("Invalid JSON body")

    form = RegisterForm(data)
    if not form.is_valid():
        return JsonResponse({
            'success': False,
            'message': first_error(form),
            'errors': error_messages(form.errors),
        }, status=400)

    user = AccountService().register(
        form.cleaned_data['username'],
        form.cleaned_data['email'],
        form.cleaned_data['password'],
    )
    login(request, user, backend=MODEL_BACKEND)

    return JsonResponse({
        'success': True,
        'message': 'User registered successfully',
        'user': user_to_dict(user),
    }, status=201)


@require_http_methods(["POST"])
def forgot_password_view(request):
    data = read_json(request)
    form = ForgotPasswordForm(data or None)
    if not form.is_valid():
        return JsonResponse({'success': False, 'message': 'A valid email is required'}, status=400)

    # Ta sama odpowiedź niezależnie od tego, czy konto istnieje
    AccountService().send_password_reset(form.cleaned_data['email'])
    return JsonResponse({
        'success': True,
        'message': 'If an account exists for this email, a password reset link has been sent',
    })


@require_http_methods(["POST"])
def reset_password_view(request):
    data = read_json(request)
    form = ResetPasswordForm(data or None)
    if not form.is_valid():
        return JsonResponse({'success': False, 'message': first_error(form), 'errors': error_messages(form.errors)}, status=400)

    try:
        AccountService().reset_password(
            form.cleaned_data['uid'],
            form.cleaned_data['token'],
            form.cleaned_data['password'],
        )
    except ValueError as e:
        return JsonResponse({'success': False, 'message': str(e)}, status=400)

    return JsonResponse({'success': True, 'message': 'Password has been reset'})


# ---------------------------------------------------------------
# Diagnostyka
# ---------------------------------------------------------------

def health_view(request):
    return JsonResponse({'status': 'healthy'})


def status_view(request):
    integrations = {
        'email': bool(getattr(settings, 'EMAIL_ENABLED', False)),
        'identityProvider': get_identity_provider().is_configured(),
        'payments': bool(settings.PAYPAL_CLIENT_ID and settings.PAYPAL_PLAN_ID),
    }
    return JsonResponse({
        'status': 'running',
        'timestamp': timezone.now().isoformat(),
        'database': connection.vendor,
        'integrations': integrations,
        'isFullyConfigured': all(integrations.values()),
    })
