import django_filters
from .models import Goal


class GoalFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(lookup_expr='icontains')
    parent = django_filters.NumberFilter(field_name='parent_id')
    # ?root=true -> tylko cele główne, ?root=false -> tylko podcele
    root = django_filters.BooleanFilter(field_name='parent', lookup_expr='isnull')
    active = django_filters.BooleanFilter()

    class Meta:
        model = Goal
        fields = ['title', 'parent', 'root', 'active']
