# mindvault/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.core.urls')),  # Dashboard + callback dostawcy tożsamości
    # Strony (HTML):
    path('goals/', include('apps.goals.urls')),
    path('subscription/', include('apps.subscriptions.urls')),
    # API (JSON):
    path('api/', include('apps.core.api_urls')),
    path('api/', include('apps.goals.api_urls')),
    path('api/', include('apps.transcriptions.urls')),
    path('api/', include('apps.reports.urls')),
    path('api/', include('apps.quotes.urls')),
    path('api/', include('apps.subscriptions.api_urls')),
]
