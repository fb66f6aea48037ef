import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from ContentActions.signals import content_approved

from .models import Brand
from .services.team_counter_service import TeamCounterService

logger = logging.getLogger(__name__)


@receiver(content_approved)
def count_approved_content(sender, action_id, team_id, **kwargs):
    """Update the team content counter once an approval is committed."""
    logger.info(f"Conteúdo aprovado para ação {action_id}; atualizando contador da equipe {team_id}")
    TeamCounterService.increment_content_counter(team_id)


@receiver(post_save, sender=Brand)
def count_created_brand(sender, instance, created, **kwargs):
    if created:
        TeamCounterService.increment_brand_counter(instance.team_id)


@receiver(post_delete, sender=Brand)
def count_deleted_brand(sender, instance, **kwargs):
    TeamCounterService.decrement_brand_counter(instance.team_id)
