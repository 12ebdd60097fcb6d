from django.urls import path
from . import views

urlpatterns = [
    path('', views.subscription_page_view, name='subscription'),
]
