from django.urls import path
from . import views

urlpatterns = [
    path('quotes', views.quotes_api_view, name='api_quotes'),
    path('quotes/daily', views.daily_quote_api_view, name='api_daily_quote'),
    path('quotes/<int:pk>', views.quote_detail_api_view, name='api_quote_detail'),
]
