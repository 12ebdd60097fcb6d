from django.urls import path
from . import views

urlpatterns = [
    path('login', views.login_view, name='login'),
    path('logout', views.logout_view, name='logout'),
    path('user', views.current_user_view, name='api_current_user'),
    path('register', views.register_view, name='api_register'),
    path('forgot-password', views.forgot_password_view, name='api_forgot_password'),
    path('reset-password', views.reset_password_view, name='api_reset_password'),
    path('health', views.health_view, name='api_health'),
    path('status', views.status_view, name='api_status'),
]
