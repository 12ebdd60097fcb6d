# apps/reports/domain/services.py
from datetime import date, datetime
from typing import Optional
import pytz
from dateutil import parser as date_parser
from django.db import transaction
from django.db.models import F, Sum
from django.utils import timezone
from apps.goals.models import Goal
from apps.reports.models import ProjectTracking, UserActivity


def parse_iso_date(value) -> Optional[date]:
    """'2024-05-01' lub pełny ISO datetime -> date (w UTC). Pusty -> None."""
    if value in (None, ''):
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value

    parsed = date_parser.isoparse(str(value))  # ValueError przy złym formacie
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(pytz.UTC)
    return parsed.date()


def today_utc() -> date:
    return datetime.now(pytz.UTC).date()


def activity_to_dict(activity: UserActivity) -> dict:
    return {
        'id': activity.id,
        'userId': activity.user_id,
        'activityType': activity.activity_type,
        'details': activity.details,
        'timestamp': activity.timestamp.isoformat(),
    }


def tracking_to_dict(tracking: ProjectTracking) -> dict:
    return {
        'id': tracking.id,
        'userId': tracking.user_id,
        'goalId': tracking.goal_id,
        'totalTime': tracking.total_time,
        'sessionsCount': tracking.sessions_count,
        'lastActivity': tracking.last_activity.isoformat() if tracking.last_activity else None,
        'dateGrouping': tracking.date_grouping.isoformat(),
    }


class ReportService:

    def get_tracking(self, user, start: Optional[date] = None, end: Optional[date] = None):
        """Wpisy czasu pracy usera, opcjonalnie w zakresie dat (włącznie)."""
        qs = ProjectTracking.objects.filter(user=user)
        if start and end:
            qs = qs.filter(date_grouping__gte=start, date_grouping__lte=end)
        return list(qs)

    def track_time(self, user, goal: Goal, total_time: int = 0, sessions_count: int = 1,
                   day: Optional[date] = None) -> ProjectTracking:
        """
        Dodaje czas i sesje do wpisu (user, cel, dzień).
        Jeden wiersz na dzień - kolejne sesje tylko zwiększają liczniki.
        """
        if total_time < 0 or sessions_count < 0:
            raise ValueError("Tracked time and sessions cannot be negative")

        day = day or today_utc()

        with transaction.atomic():
            tracking, _ = ProjectTracking.objects.select_for_update().get_or_create(
                user=user, goal=goal, date_grouping=day
            )
            ProjectTracking.objects.filter(pk=tracking.pk).update(
                total_time=F('total_time') + total_time,
                sessions_count=F('sessions_count') + sessions_count,
                last_activity=timezone.now(),
            )
            tracking.refresh_from_db()

        return tracking

    def get_goal_summary(self, user, start: Optional[date] = None, end: Optional[date] = None):
        """Suma czasu i sesji per cel (dla wykresu 'Time Analysis')."""
        qs = ProjectTracking.objects.filter(user=user)
        if start and end:
            qs = qs.filter(date_grouping__gte=start, date_grouping__lte=end)

        data = qs.values('goal_id', 'goal__title') \
            .annotate(total_time=Sum('total_time'), sessions=Sum('sessions_count')) \
            .order_by('-total_time', 'goal_id')

        return [
            {
                'goalId': item['goal_id'],
                'title': item['goal__title'],
                'totalTime': item['total_time'] or 0,
                'sessionsCount': item['sessions'] or 0,
            }
            for item in data
        ]
