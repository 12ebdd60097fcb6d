# apps/core/ports/email_sender.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class EmailResult:
    ok: bool
    error: Optional[str] = None  # Diagnostyka przy niepowodzeniu

    def __bool__(self):
        return self.ok


class IEmailSender(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, text: str = "", html: Optional[str] = None) -> EmailResult:
        """
        Wysyła email transakcyjny.
        Nigdy nie rzuca wyjątku - błąd dostawcy wraca jako EmailResult(ok=False).
        """
        pass
