# apps/core/adapters/google_identity.py
import logging
import os
from typing import Optional, Tuple
from django.conf import settings
from google.auth.exceptions import GoogleAuthError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token
from google_auth_oauthlib.flow import Flow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
from apps.core.ports.identity_provider import ExternalIdentity, IdentityError, IIdentityProvider

logger = logging.getLogger(__name__)


class GoogleIdentityProvider(IIdentityProvider):
    def __init__(self, client_secrets_file: Optional[str] = None, redirect_uri: Optional[str] = None, scopes=None):
        self.client_secrets_file = client_secrets_file or settings.GOOGLE_CLIENT_SECRETS_FILE
        self.redirect_uri = redirect_uri or settings.GOOGLE_REDIRECT_URI
        self.scopes = scopes or settings.GOOGLE_SCOPES

    def is_configured(self) -> bool:
        return bool(self.client_secrets_file) and os.path.exists(self.client_secrets_file)

    def _flow(self, state: Optional[str] = None) -> Flow:
        return Flow.from_client_secrets_file(
            self.client_secrets_file,
            scopes=self.scopes,
            state=state,
            redirect_uri=self.redirect_uri
        )

    def authorization_url(self) -> Tuple[str, str]:
        flow = self._flow()
        return flow.authorization_url(
            access_type='online',
            include_granted_scopes='true',
            prompt='select_account'
        )

    def fetch_identity(self, authorization_response: str, state: str) -> ExternalIdentity:
        flow = self._flow(state=state)

        try:
            flow.fetch_token(authorization_response=authorization_response)
            creds = flow.credentials

            # Weryfikacja podpisu i audience ID tokena
            claims = id_token.verify_oauth2_token(
                creds.id_token,
                google_requests.Request(),
                flow.client_config['client_id']
            )
        except (OAuth2Error, GoogleAuthError, ValueError) as e:
            logger.warning("Google login failed: %s", e)
            raise IdentityError(str(e)) from e

        if not claims.get('email'):
            raise IdentityError("Identity provider did not return an email address")

        return ExternalIdentity(
            subject=claims['sub'],
            email=claims['email'],
            name=claims.get('name', ''),
            picture=claims.get('picture', ''),
            email_verified=bool(claims.get('email_verified')),
        )
