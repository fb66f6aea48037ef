"""Helpers compartilhados pelos testes do ciclo de vida de conteúdo."""

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone

from ContentActions.models import Action, ActionType, TemporaryContent
from Teams.models import Brand, Team

User = get_user_model()


def create_test_user(email, password="testpass123", team=None):
    """Helper para criar usuário de teste com username gerado"""
    username = email.split("@")[0]
    user = User.objects.create_user(
        username=username,
        email=email,
        password=password
    )
    if team is not None:
        user.profile.join_team(team)
    return user


def create_team(code, name=None):
    return Team.objects.create(name=name or f"Equipe {code}", code=code)


def create_brand(team, name="Marca Teste"):
    return Brand.objects.create(team=team, name=name, responsible="Responsável")


def create_action(team, user, brand, **kwargs):
    defaults = {
        "type": ActionType.CREATE_CONTENT,
        "details": {"prompt": "Post sobre lançamento"},
        "result": {"title": "Rascunho", "body": "Texto", "hashtags": []},
    }
    defaults.update(kwargs)
    return Action.objects.create(team=team, user=user, brand=brand, **defaults)


def create_temporary_content(action, user, team=None, **kwargs):
    defaults = {
        "image_url": "https://cdn.example.com/img.png",
        "title": "Título novo",
        "body": "Corpo novo",
        "hashtags": ["#lancamento"],
    }
    defaults.update(kwargs)
    team = team or action.team
    return TemporaryContent.objects.create(
        action=action, user=user, team=team, **defaults)


def expired(hours=1):
    return timezone.now() - timedelta(hours=hours)
