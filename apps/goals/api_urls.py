from django.urls import path
from . import views

urlpatterns = [
    path('goals', views.goals_api_view, name='api_goals'),
    path('goals/<int:pk>', views.goal_detail_api_view, name='api_goal_detail'),
]
