# apps/reports/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('user-activity', views.user_activity_api_view, name='api_user_activity'),
    path('project-tracking', views.project_tracking_api_view, name='api_project_tracking'),
    path('project-tracking/summary', views.project_tracking_summary_api_view, name='api_project_tracking_summary'),
]
