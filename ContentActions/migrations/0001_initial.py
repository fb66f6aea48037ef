import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import ContentActions.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('Teams', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Action',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('CREATE_CONTENT', 'Criar conteúdo'), ('REVIEW_CONTENT', 'Revisar conteúdo'), ('PLAN_CONTENT', 'Planejar conteúdo')], help_text='Tipo da ação (imutável após a criação)', max_length=20)),
                ('status', models.CharField(default='Em revisão', help_text='Status atual da ação', max_length=50)),
                ('approved', models.BooleanField(default=False, help_text='Indica se o conteúdo foi aprovado')),
                ('revisions', models.PositiveIntegerField(default=0, help_text='Número de revisões solicitadas')),
                ('result', models.JSONField(blank=True, help_text='Resultado gerado (formato depende do tipo)', null=True)),
                ('details', models.JSONField(blank=True, help_text='Parâmetros da solicitação original', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('brand', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='actions', to='Teams.brand')),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='actions', to='Teams.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='content_actions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Ação de Conteúdo',
                'verbose_name_plural': 'Ações de Conteúdo',
                'db_table': 'content_actions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['team', 'created_at'], name='action_team_created_idx'),
                    models.Index(fields=['team', 'approved'], name='action_team_approved_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='TemporaryContent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('image_url', models.TextField(blank=True, default='')),
                ('title', models.TextField(blank=True, default='')),
                ('body', models.TextField(blank=True, default='')),
                ('hashtags', models.JSONField(blank=True, default=list)),
                ('revisions', models.PositiveIntegerField(default=0)),
                ('brand', models.CharField(blank=True, max_length=200, null=True)),
                ('theme', models.CharField(blank=True, max_length=200, null=True)),
                ('original_id', models.CharField(blank=True, max_length=100, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('expires_at', models.DateTimeField(default=ContentActions.models.default_temporary_content_expiry)),
                ('action', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='temporary_contents', to='ContentActions.action')),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='temporary_contents', to='Teams.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='temporary_contents', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Conteúdo Temporário',
                'verbose_name_plural': 'Conteúdos Temporários',
                'db_table': 'temporary_contents',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['expires_at'], name='tempcontent_expires_idx'),
                    models.Index(fields=['user', 'team'], name='tempcontent_user_team_idx'),
                ],
            },
        ),
    ]
