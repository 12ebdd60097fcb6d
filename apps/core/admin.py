from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'subscription_tier', 'trial_ends_at', 'updated_at')
    list_filter = ('subscription_tier',)
    search_fields = ('user__username', 'user__email')
