from django.contrib import admin
from .models import ProjectTracking, UserActivity


@admin.register(UserActivity)
class UserActivityAdmin(admin.ModelAdmin):
    list_display = ('user', 'activity_type', 'timestamp')
    list_filter = ('activity_type',)


@admin.register(ProjectTracking)
class ProjectTrackingAdmin(admin.ModelAdmin):
    list_display = ('user', 'goal', 'date_grouping', 'total_time', 'sessions_count')
    list_filter = ('date_grouping',)
