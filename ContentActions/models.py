import uuid
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone

from Teams.models import Brand, Team


class ActionType(models.TextChoices):
    CREATE_CONTENT = 'CREATE_CONTENT', 'Criar conteúdo'
    REVIEW_CONTENT = 'REVIEW_CONTENT', 'Revisar conteúdo'
    PLAN_CONTENT = 'PLAN_CONTENT', 'Planejar conteúdo'


class ActionStatus(models.TextChoices):
    IN_REVIEW = 'Em revisão', 'Em revisão'
    APPROVED = 'Aprovado', 'Aprovado'
    PROCESSING = 'PROCESSING', 'Processando'
    COMPLETED = 'COMPLETED', 'Concluído'


def default_temporary_content_expiry():
    return timezone.now() + timedelta(hours=settings.TEMPORARY_CONTENT_TTL_HOURS)


class Action(models.Model):
    """Persistent record of one content task and its lifecycle state."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(
        Team, on_delete=models.CASCADE, related_name='actions')
    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='content_actions')
    brand = models.ForeignKey(
        Brand, on_delete=models.CASCADE, related_name='actions')

    type = models.CharField(
        max_length=20,
        choices=ActionType.choices,
        help_text="Tipo da ação (imutável após a criação)"
    )
    # Free-form label; ActionStatus lists the values the system produces
    status = models.CharField(
        max_length=50,
        default=ActionStatus.IN_REVIEW,
        help_text="Status atual da ação"
    )
    approved = models.BooleanField(
        default=False, help_text="Indica se o conteúdo foi aprovado")
    revisions = models.PositiveIntegerField(
        default=0, help_text="Número de revisões solicitadas")

    result = models.JSONField(
        null=True, blank=True, help_text="Resultado gerado (formato depende do tipo)")
    details = models.JSONField(
        null=True, blank=True, help_text="Parâmetros da solicitação original")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'content_actions'
        verbose_name = 'Ação de Conteúdo'
        verbose_name_plural = 'Ações de Conteúdo'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['team', 'created_at'], name='action_team_created_idx'),
            models.Index(fields=['team', 'approved'], name='action_team_approved_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} - {self.status} ({self.id})"



class TemporaryContent(models.Model):
    """Staging record for a candidate result not yet committed to an Action."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    action = models.ForeignKey(
        Action,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='temporary_contents'
    )
    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='temporary_contents')
    team = models.ForeignKey(
        Team, on_delete=models.CASCADE, related_name='temporary_contents')

    image_url = models.TextField(blank=True, default="")
    title = models.TextField(blank=True, default="")
    body = models.TextField(blank=True, default="")
    hashtags = models.JSONField(default=list, blank=True)
    revisions = models.PositiveIntegerField(default=0)

    brand = models.CharField(max_length=200, null=True, blank=True)
    theme = models.CharField(max_length=200, null=True, blank=True)
    original_id = models.CharField(max_length=100, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    expires_at = models.DateTimeField(default=default_temporary_content_expiry)

    class Meta:
        db_table = 'temporary_contents'
        verbose_name = 'Conteúdo Temporário'
        verbose_name_plural = 'Conteúdos Temporários'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['expires_at'], name='tempcontent_expires_idx'),
            models.Index(fields=['user', 'team'], name='tempcontent_user_team_idx'),
        ]

    def __str__(self):
        return f"Conteúdo temporário {self.id} (expira em {self.expires_at})"

    @property
    def is_expired(self):
        return self.expires_at <= timezone.now()

    def soft_expire(self, minutes=None, using=None):
        """Shorten the lifetime instead of deleting, so late readers still find it."""
        if minutes is None:
            minutes = settings.TEMPORARY_CONTENT_APPROVED_GRACE_MINUTES
        self.expires_at = timezone.now() + timedelta(minutes=minutes)
        self.save(update_fields=['expires_at', 'updated_at'], using=using)
