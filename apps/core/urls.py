from django.urls import path
from . import views

urlpatterns = [
    path('', views.dashboard_view, name='dashboard'),
    path('auth/google/callback/', views.google_callback, name='google_callback'),
]
