import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('Teams', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('ADMIN', 'Administrador'), ('MEMBER', 'Membro'), ('WITHOUT_TEAM', 'Sem Equipe')], default='WITHOUT_TEAM', max_length=20)),
                ('status', models.CharField(choices=[('ACTIVE', 'Ativo'), ('PENDING', 'Pendente'), ('INACTIVE', 'Inativo'), ('NO_TEAM', 'Sem Equipe')], default='NO_TEAM', max_length=20)),
                ('tutorial_completed', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.ForeignKey(blank=True, help_text='Equipe à qual o usuário pertence', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='members', to='Teams.team')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Perfil do Usuário',
                'verbose_name_plural': 'Perfis dos Usuários',
                'db_table': 'user_profiles',
            },
        ),
    ]
