from django import forms
from apps.core.models import UserProfile


class SubscriptionUpdateForm(forms.Form):
    subscriptionId = forms.CharField(max_length=100, required=False)
    subscriptionTier = forms.ChoiceField(choices=UserProfile.SubscriptionTier.choices)
