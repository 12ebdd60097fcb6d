from django.urls import path
from . import views

urlpatterns = [
    path('user/subscription', views.subscription_api_view, name='api_user_subscription'),
    path('webhooks/paypal', views.paypal_webhook_view, name='api_paypal_webhook'),
]
