import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('operation_category', models.CharField(choices=[('content', 'Ciclo de Vida do Conteúdo'), ('team', 'Operações de Equipe'), ('system', 'Operações do Sistema')], help_text='Categoria da operação', max_length=20)),
                ('action', models.CharField(choices=[('content_created', 'Conteúdo Criado'), ('content_deleted', 'Conteúdo Excluído'), ('content_approved', 'Conteúdo Aprovado'), ('content_approval_failed', 'Aprovação de Conteúdo Falhou'), ('content_revision_requested', 'Revisão Solicitada'), ('content_revision_failed', 'Solicitação de Revisão Falhou'), ('team_counters_initialized', 'Contadores da Equipe Inicializados'), ('temporary_content_cleanup', 'Limpeza de Conteúdos Temporários'), ('system_error', 'Erro do Sistema')], help_text='Ação específica realizada', max_length=50)),
                ('status', models.CharField(choices=[('success', 'Sucesso'), ('failure', 'Falha'), ('pending', 'Pendente'), ('error', 'Erro')], default='success', help_text='Resultado da operação', max_length=10)),
                ('resource_type', models.CharField(blank=True, help_text="Tipo de recurso afetado (ex.: 'Action', 'Team')", max_length=100)),
                ('resource_id', models.CharField(blank=True, help_text='ID do recurso afetado', max_length=100)),
                ('ip_address', models.GenericIPAddressField(blank=True, help_text='Endereço IP da requisição', null=True)),
                ('user_agent', models.TextField(blank=True, help_text='String do user agent')),
                ('details', models.JSONField(blank=True, default=dict, help_text='Detalhes adicionais sobre a operação')),
                ('error_message', models.TextField(blank=True, help_text='Mensagem de erro se a operação falhou')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now, help_text='Quando a operação ocorreu')),
                ('request_id', models.CharField(blank=True, help_text='Identificador único da requisição para rastreamento', max_length=100)),
                ('user', models.ForeignKey(blank=True, help_text='Usuário que realizou a ação', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'audit_logs',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['timestamp'], name='audit_timestamp_idx'),
                    models.Index(fields=['user', 'timestamp'], name='audit_user_timestamp_idx'),
                    models.Index(fields=['operation_category', 'timestamp'], name='audit_category_timestamp_idx'),
                    models.Index(fields=['resource_type', 'resource_id'], name='audit_resource_idx'),
                ],
            },
        ),
    ]
