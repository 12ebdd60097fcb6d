# apps/reports/services.py
from .models import UserActivity


class ActivityLogger:
    @staticmethod
    def log(user, activity_type, details=None):
        """
        Uniwersalna metoda do logowania zdarzeń.
        """
        if not user or not user.is_authenticated:
            return None  # Nie logujemy działań anonimowych

        return UserActivity.objects.create(
            user=user,
            activity_type=activity_type,
            details=details or {}
        )

    @staticmethod
    def log_for_user_id(user_id, activity_type, details=None):
        if not user_id:
            return None

        return UserActivity.objects.create(
            user_id=user_id,
            activity_type=activity_type,
            details=details or {}
        )
