from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone


class AuditCategory(models.TextChoices):
    CONTENT = 'content', 'Ciclo de Vida do Conteúdo'
    TEAM = 'team', 'Operações de Equipe'
    SYSTEM = 'system', 'Operações do Sistema'


class AuditAction(models.TextChoices):
    CONTENT_CREATED = 'content_created', 'Conteúdo Criado'
    CONTENT_DELETED = 'content_deleted', 'Conteúdo Excluído'
    CONTENT_APPROVED = 'content_approved', 'Conteúdo Aprovado'
    CONTENT_APPROVAL_FAILED = 'content_approval_failed', 'Aprovação de Conteúdo Falhou'
    CONTENT_REVISION_REQUESTED = 'content_revision_requested', 'Revisão Solicitada'
    CONTENT_REVISION_FAILED = 'content_revision_failed', 'Solicitação de Revisão Falhou'
    TEAM_COUNTERS_INITIALIZED = 'team_counters_initialized', 'Contadores da Equipe Inicializados'
    TEMPORARY_CONTENT_CLEANUP = 'temporary_content_cleanup', 'Limpeza de Conteúdos Temporários'
    SYSTEM_ERROR = 'system_error', 'Erro do Sistema'


class AuditStatus(models.TextChoices):
    SUCCESS = 'success', 'Sucesso'
    FAILURE = 'failure', 'Falha'
    PENDING = 'pending', 'Pendente'
    ERROR = 'error', 'Erro'


class AuditLog(models.Model):
    """One entry per lifecycle, team or maintenance operation."""

    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        help_text="Usuário que realizou a ação"
    )
    operation_category = models.CharField(
        max_length=20, choices=AuditCategory.choices, help_text="Categoria da operação")
    action = models.CharField(
        max_length=50, choices=AuditAction.choices, help_text="Ação específica realizada")
    status = models.CharField(
        max_length=10,
        choices=AuditStatus.choices,
        default=AuditStatus.SUCCESS,
        help_text="Resultado da operação"
    )

    # Affected record, e.g. ('Action', '<uuid>')
    resource_type = models.CharField(
        max_length=100, blank=True, help_text="Tipo de recurso afetado (ex.: 'Action', 'Team')")
    resource_id = models.CharField(
        max_length=100, blank=True, help_text="ID do recurso afetado")

    ip_address = models.GenericIPAddressField(
        null=True, blank=True, help_text="Endereço IP da requisição")
    user_agent = models.TextField(blank=True, help_text="String do user agent")
    details = models.JSONField(
        default=dict, blank=True, help_text="Detalhes adicionais sobre a operação")
    error_message = models.TextField(
        blank=True, help_text="Mensagem de erro se a operação falhou")

    timestamp = models.DateTimeField(
        default=timezone.now, help_text="Quando a operação ocorreu")
    request_id = models.CharField(
        max_length=100, blank=True,
        help_text="Identificador único da requisição para rastreamento")

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['timestamp'], name='audit_timestamp_idx'),
            models.Index(fields=['user', 'timestamp'], name='audit_user_timestamp_idx'),
            models.Index(fields=['operation_category', 'timestamp'],
                         name='audit_category_timestamp_idx'),
            models.Index(fields=['resource_type', 'resource_id'], name='audit_resource_idx'),
        ]

    def __str__(self):
        actor = self.user.username if self.user else "Sistema"
        return f"{actor} - {self.get_action_display()} ({self.get_status_display()})"
