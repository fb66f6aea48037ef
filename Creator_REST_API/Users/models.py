from django.contrib.auth.models import User
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver


class UserRole(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrador'
    MEMBER = 'MEMBER', 'Membro'
    WITHOUT_TEAM = 'WITHOUT_TEAM', 'Sem Equipe'


class UserStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Ativo'
    PENDING = 'PENDING', 'Pendente'
    INACTIVE = 'INACTIVE', 'Inativo'
    NO_TEAM = 'NO_TEAM', 'Sem Equipe'


class UserProfile(models.Model):
    """Extended user profile holding team membership."""

    class Meta:
        app_label = 'Users'
        db_table = 'user_profiles'
        verbose_name = 'Perfil do Usuário'
        verbose_name_plural = 'Perfis dos Usuários'

    user = models.OneToOneField(
        User, on_delete=models.CASCADE, related_name='profile')
    team = models.ForeignKey(
        'Teams.Team',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='members',
        help_text="Equipe à qual o usuário pertence"
    )
    role = models.CharField(
        max_length=20, choices=UserRole.choices, default=UserRole.WITHOUT_TEAM)
    status = models.CharField(
        max_length=20, choices=UserStatus.choices, default=UserStatus.NO_TEAM)
    tutorial_completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Perfil de {self.user.email}"

    def join_team(self, team, role=UserRole.MEMBER):
        self.team = team
        self.role = role
        self.status = UserStatus.ACTIVE
        self.save(update_fields=['team', 'role', 'status', 'updated_at'])


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """Create user profile when user is created."""
    if created:
        UserProfile.objects.create(user=instance)


@receiver(post_save, sender=User)
def save_user_profile(sender, instance, **kwargs):
    """Save user profile when user is saved."""
    if hasattr(instance, 'profile'):
        instance.profile.save()
