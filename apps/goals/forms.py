from django import forms
from .models import Goal
from .domain.services import validate_parent


class GoalForm(forms.ModelForm):
    class Meta:
        model = Goal
        fields = ['title', 'description', 'parent', 'order']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'parent': forms.Select(attrs={'class': 'form-select'}),
            'order': forms.NumberInput(attrs={'class': 'form-control'}),
        }

    def __init__(self, user, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Rodzicem może być tylko cel główny tego usera (i nie on sam)
        parents = Goal.objects.filter(user=user, parent__isnull=True)
        if self.instance.pk:
            parents = parents.exclude(pk=self.instance.pk)
        self.fields['parent'].queryset = parents
        self.fields['parent'].required = False

    def clean_parent(self):
        parent = self.cleaned_data.get('parent')
        goal_id = self.instance.pk
        has_children = bool(goal_id) and self.instance.sub_goals.exists()
        try:
            validate_parent(goal_id, parent, has_children=has_children)
        except ValueError as e:
            raise forms.ValidationError(str(e))
        return parent
