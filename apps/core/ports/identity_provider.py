# apps/core/ports/identity_provider.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple


class IdentityError(Exception):
    """Logowanie u dostawcy tożsamości nie powiodło się."""


@dataclass
class ExternalIdentity:
    subject: str  # stały identyfikator usera u dostawcy
    email: str
    name: str = ""
    picture: str = ""
    email_verified: bool = False


class IIdentityProvider(ABC):
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    def authorization_url(self) -> Tuple[str, str]:
        """Zwraca (url do przekierowania, state do zapamiętania w sesji)."""
        pass

    @abstractmethod
    def fetch_identity(self, authorization_response: str, state: str) -> ExternalIdentity:
        """Wymienia kod z callbacku na tożsamość usera. Rzuca IdentityError."""
        pass
