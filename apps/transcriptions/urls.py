from django.urls import path
from . import views

urlpatterns = [
    path('transcriptions', views.transcriptions_api_view, name='api_transcriptions'),
    path('transcriptions/<int:pk>', views.transcription_detail_api_view, name='api_transcription_detail'),
    path('analyze', views.analyze_api_view, name='api_analyze'),
]
