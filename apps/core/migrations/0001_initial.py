from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('bio', models.TextField(blank=True)),
                ('profile_image_url', models.URLField(blank=True, max_length=500)),
                ('subscription_tier', models.CharField(choices=[('free', 'Free'), ('trial', 'Trial'), ('premium', 'Premium'), ('paid', 'Paid')], default='free', max_length=20)),
                ('subscription_id', models.CharField(blank=True, max_length=100, null=True)),
                ('trial_ends_at', models.DateTimeField(blank=True, null=True)),
                ('identity_subject', models.CharField(blank=True, max_length=255, null=True, unique=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
        ),
    ]
