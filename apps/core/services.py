# apps/core/services.py
import logging
from datetime import timedelta
from django.conf import settings
from django.contrib.auth.models import User
from django.contrib.auth.tokens import default_token_generator
from django.db import transaction
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.encoding import force_bytes, force_str
from django.utils.http import urlsafe_base64_decode, urlsafe_base64_encode
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger
from .adapters.django_mail import DjangoEmailSender
from .models import UserProfile
from .ports.email_sender import IEmailSender
from .ports.identity_provider import ExternalIdentity, IdentityError

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, email_sender: IEmailSender = None):
        self.email_sender = email_sender or DjangoEmailSender()

    @transaction.atomic
    def register(self, username: str, email: str, password: str) -> User:
        user = User.objects.create_user(username=username, email=email, password=password)
        self._start_trial(user.profile)

        ActivityLogger.log(user, UserActivity.ActivityType.ACCOUNT_CREATED)
        return user

    def _start_trial(self, profile: UserProfile):
        profile.subscription_tier = UserProfile.SubscriptionTier.TRIAL
        profile.trial_ends_at = timezone.now() + timedelta(days=settings.TRIAL_DAYS)
        profile.save()

    def login_external_identity(self, identity: ExternalIdentity) -> User:
        """
        Znajduje usera po identyfikatorze dostawcy, potem po emailu.
        Jeśli nie istnieje - zakłada konto (bez hasła lokalnego).
        Email bez potwierdzenia u dostawcy nie wiąże ani nie zakłada konta.
        """
        profile = UserProfile.objects.select_related('user').filter(identity_subject=identity.subject).first()
        if profile:
            return profile.user

        if not identity.email_verified:
            logger.warning("Rejected external login with unverified email (subject=%s)", identity.subject)
            raise IdentityError("Email address is not verified by the identity provider")

        with transaction.atomic():
            user = User.objects.filter(email__iexact=identity.email).first()
            created = user is None
            if created:
                first_name, _, last_name = identity.name.partition(' ')
                user = User.objects.create_user(
                    username=self._unique_username(identity.email),
                    email=identity.email,
                    first_name=first_name[:150],
                    last_name=last_name[:150],
                )
                user.set_unusable_password()
                user.save()

            profile = user.profile
            profile.identity_subject = identity.subject
            if identity.picture and not profile.profile_image_url:
                profile.profile_image_url = identity.picture
            profile.save()

            if created:
                self._start_trial(profile)
                ActivityLogger.log(user, UserActivity.ActivityType.ACCOUNT_CREATED, {'provider': 'google'})

        return user

    def _unique_username(self, email: str) -> str:
        base = (email.split('@')[0] or 'user')[:140]
        username = base
        suffix = 1
        while User.objects.filter(username__iexact=username).exists():
            suffix += 1
            username = f"{base}{suffix}"
        return username

    def send_password_reset(self, email: str):
        """
        Wysyła link resetu hasła. Brak konta -> None (wołający nie zdradza tego klientowi).
        """
        user = User.objects.filter(email__iexact=email, is_active=True).first()
        if user is None:
            logger.info("Password reset requested for unknown email")
            return None

        uid = urlsafe_base64_encode(force_bytes(user.pk))
        token = default_token_generator.make_token(user)
        context = {
            'user': user,
            'app_name': settings.APP_NAME,
            'reset_url': f"{settings.APP_BASE_URL}/reset-password?uid={uid}&token={token}",
        }

        result = self.email_sender.send(
            to=user.email,
            subject=f"Reset your {settings.APP_NAME} password",
            text=render_to_string('core/emails/password_reset.txt', context),
            html=render_to_string('core/emails/password_reset.html', context),
        )
        if not result:
            logger.warning("Password reset email for user %s was not sent: %s", user.id, result.error)
        return result

    def reset_password(self, uidb64: str, token: str, password: str) -> User:
        try:
            user = User.objects.get(pk=force_str(urlsafe_base64_decode(uidb64)))
        except (TypeError, ValueError, OverflowError, User.DoesNotExist):
            raise ValueError("Invalid password reset link")

        if not default_token_generator.check_token(user, token):
            raise ValueError("Password reset link is invalid or has expired")

        user.set_password(password)
        user.save()
        return user

