# apps/transcriptions/services.py
from django.db import transaction
from apps.goals.models import Goal
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger
from .domain.analysis import TextAnalysis, analyze
from .models import Transcription


class TranscriptionService:

    def analyze_for_user(self, user, text: str) -> TextAnalysis:
        """Analiza tekstu względem aktywnych celów usera."""
        goals = Goal.objects.filter(user=user, active=True)
        return analyze(text, goals)

    def create(self, user, content: str, goal_id=None, duration: int = 0, media=None) -> Transcription:
        content = (content or '').strip()
        if not content:
            raise ValueError("Transcription content cannot be empty")
        if duration < 0:
            raise ValueError("Duration cannot be negative")

        goal = None
        if goal_id is not None:
            goal = Goal.objects.filter(pk=goal_id, user=user).first()
            if goal is None:
                raise LookupError("Goal not found")

        result = self.analyze_for_user(user, content)

        with transaction.atomic():
            transcription = Transcription.objects.create(
                user=user,
                goal=goal,
                content=content,
                corrected_content=result.corrected_text,
                analysis=result.to_dict(),
                goal_matches=result.goal_matches,
                duration=duration,
                media=media or {},
            )
            ActivityLogger.log(user, UserActivity.ActivityType.TRANSCRIPTION, {
                'transcriptionId': transcription.id,
                'duration': duration,
            })

        return transcription
