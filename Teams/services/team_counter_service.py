import logging

from django.db import transaction
from django.db.models import F, Value
from django.db.models.functions import Greatest

from ..models import Brand, Team

logger = logging.getLogger(__name__)


class TeamCounterService:
    """
    Service para manter os contadores desnormalizados de cada equipe.

    Os contadores são um cache eventualmente consistente usado na exibição de
    limites do plano; a fonte da verdade continua sendo as tabelas de ações e
    marcas. Incrementos e decrementos nunca propagam erros.
    """

    @staticmethod
    def _apply(team_id, field, delta):
        if delta >= 0:
            expression = F(field) + delta
        else:
            expression = Greatest(F(field) + delta, Value(0))
        return Team.objects.filter(id=team_id).update(**{field: expression})

    @staticmethod
    def increment_content_counter(team_id, increment=1):
        """Incrementa o contador de conteúdos de uma equipe"""
        try:
            TeamCounterService._apply(team_id, 'total_contents', increment)
        except Exception as e:
            logger.error(
                f"Erro ao incrementar contador de conteúdos da equipe {team_id}: {e}")

    @staticmethod
    def decrement_content_counter(team_id, decrement=1):
        """Decrementa o contador de conteúdos de uma equipe (mínimo zero)"""
        try:
            TeamCounterService._apply(team_id, 'total_contents', -decrement)
        except Exception as e:
            logger.error(
                f"Erro ao decrementar contador de conteúdos da equipe {team_id}: {e}")

    @staticmethod
    def increment_brand_counter(team_id, increment=1):
        """Incrementa o contador de marcas de uma equipe"""
        try:
            TeamCounterService._apply(team_id, 'total_brands', increment)
        except Exception as e:
            logger.error(
                f"Erro ao incrementar contador de marcas da equipe {team_id}: {e}")

    @staticmethod
    def decrement_brand_counter(team_id, decrement=1):
        """Decrementa o contador de marcas de uma equipe (mínimo zero)"""
        try:
            TeamCounterService._apply(team_id, 'total_brands', -decrement)
        except Exception as e:
            logger.error(
                f"Erro ao decrementar contador de marcas da equipe {team_id}: {e}")

    @staticmethod
    @transaction.atomic
    def recalculate_team_counters(team_id):
        """
        Recalcula os contadores a partir dos dados existentes

        Útil para inicializar os contadores ou corrigir inconsistências.

        Returns:
            dict: {'total_contents': int, 'total_brands': int}
        """
        # Imported here: ContentActions depends on Teams, not the other way around
        from ContentActions.models import Action

        total_contents = Action.objects.filter(
            team_id=team_id, approved=True).count()
        total_brands = Brand.objects.filter(team_id=team_id).count()

        Team.objects.filter(id=team_id).update(
            total_contents=total_contents,
            total_brands=total_brands
        )

        return {'total_contents': total_contents, 'total_brands': total_brands}

    @staticmethod
    def initialize_all_team_counters():
        """
        Recalcula os contadores de todas as equipes

        Returns:
            list: [{'team_id', 'total_contents', 'total_brands'}, ...]
        """
        results = []
        for team_id in Team.objects.values_list('id', flat=True):
            counters = TeamCounterService.recalculate_team_counters(team_id)
            results.append({'team_id': team_id, **counters})

        logger.info(f"Contadores inicializados para {len(results)} equipes")
        return results
