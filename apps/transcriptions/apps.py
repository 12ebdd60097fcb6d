from django.apps import AppConfig


class TranscriptionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.transcriptions'
    label = 'transcriptions'
