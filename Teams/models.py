import uuid

from django.contrib.auth.models import User
from django.db import models


class Team(models.Model):
    """Tenant boundary: brands, actions and members belong to one team."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, help_text="Nome da equipe")
    code = models.CharField(
        max_length=50, unique=True, help_text="Código de acesso da equipe")
    admin = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='administered_teams',
        help_text="Administrador da equipe"
    )

    # Denormalized counters, eventually consistent with Action/Brand rows
    total_contents = models.PositiveIntegerField(
        default=0, help_text="Total de conteúdos aprovados")
    total_brands = models.PositiveIntegerField(
        default=0, help_text="Total de marcas cadastradas")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        verbose_name = 'Equipe'
        verbose_name_plural = 'Equipes'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.code})"


class Brand(models.Model):
    """Brand owned by a team."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(
        Team, on_delete=models.CASCADE, related_name='brands')
    name = models.CharField(max_length=200, help_text="Nome da marca")
    responsible = models.CharField(
        max_length=200, blank=True, default="", help_text="Responsável pela marca")
    segment = models.CharField(
        max_length=200, blank=True, default="", help_text="Segmento de mercado")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'brands'
        verbose_name = 'Marca'
        verbose_name_plural = 'Marcas'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} - {self.team.name}"
