import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Team',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Nome da equipe', max_length=200)),
                ('code', models.CharField(help_text='Código de acesso da equipe', max_length=50, unique=True)),
                ('total_contents', models.PositiveIntegerField(default=0, help_text='Total de conteúdos aprovados')),
                ('total_brands', models.PositiveIntegerField(default=0, help_text='Total de marcas cadastradas')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('admin', models.ForeignKey(blank=True, help_text='Administrador da equipe', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='administered_teams', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Equipe',
                'verbose_name_plural': 'Equipes',
                'db_table': 'teams',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Brand',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Nome da marca', max_length=200)),
                ('responsible', models.CharField(blank=True, default='', help_text='Responsável pela marca', max_length=200)),
                ('segment', models.CharField(blank=True, default='', help_text='Segmento de mercado', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='brands', to='Teams.team')),
            ],
            options={
                'verbose_name': 'Marca',
                'verbose_name_plural': 'Marcas',
                'db_table': 'brands',
                'ordering': ['-created_at'],
            },
        ),
    ]
