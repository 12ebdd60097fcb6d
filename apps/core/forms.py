from django import forms
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password


class LoginForm(forms.Form):
    username = forms.CharField(max_length=150, widget=forms.TextInput(attrs={'class': 'form-control'}))
    password = forms.CharField(widget=forms.PasswordInput(attrs={'class': 'form-control'}))


class RegisterForm(forms.Form):
    username = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(min_length=8)

    def clean_username(self):
        username = self.cleaned_data['username'].strip()
        if User.objects.filter(username__iexact=username).exists():
            raise forms.ValidationError("Username already taken")
        return username

    def clean_email(self):
        email = self.cleaned_data['email'].strip()
        if User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists")
        return email

    def clean_password(self):
        password = self.cleaned_data['password']
        validate_password(password)
        return password


class ForgotPasswordForm(forms.Form):
    email = forms.EmailField()


class ResetPasswordForm(forms.Form):
    uid = forms.CharField()
    token = forms.CharField()
    password = forms.CharField(min_length=8)

    def clean_password(self):
        password = self.cleaned_data['password']
        validate_password(password)
        return password


def first_error(form):
    """Pierwszy komunikat błędu formularza (do pola 'message' w API)."""
    for errors in form.errors.get_json_data().values():
        if errors:
            return errors[0]['message']
    return "Invalid data"
