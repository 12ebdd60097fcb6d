from django.contrib import admin
from .models import Transcription


@admin.register(Transcription)
class TranscriptionAdmin(admin.ModelAdmin):
    list_display = ('user', 'goal', 'duration', 'created_at')
    search_fields = ('content',)
