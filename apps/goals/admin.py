from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'parent', 'active', 'order', 'created_at')
    list_filter = ('active',)
    search_fields = ('title',)
