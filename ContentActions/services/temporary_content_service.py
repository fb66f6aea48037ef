import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from Teams.services.team_membership_service import TeamMembershipService

from ..exceptions import ActionPermissionDenied, TemporaryContentNotFound
from ..models import TemporaryContent

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('image_url', 'title', 'body', 'hashtags')


class TemporaryContentService:
    """
    Service para o fluxo de criação rápida: cada usuário mantém no máximo um
    conteúdo temporário ativo por equipe.
    """

    @staticmethod
    def _owned(content_id, user_id, team_id):
        try:
            content = TemporaryContent.objects.filter(
                id=content_id, user_id=user_id, team_id=team_id
            ).first()
        except (DjangoValidationError, ValueError):
            content = None
        if content is None:
            raise TemporaryContentNotFound('Content not found or access denied')
        return content

    @staticmethod
    def get_active_temporary_content(user_id, team_id):
        """Retorna o conteúdo temporário mais recente ainda não expirado"""
        return TemporaryContent.objects.filter(
            user_id=user_id,
            team_id=team_id,
            expires_at__gt=timezone.now()
        ).order_by('-created_at').first()

    @staticmethod
    @transaction.atomic
    def create_temporary_content(user_id, team_id, data):
        """
        Cria um novo conteúdo temporário (expira em 24 horas)

        Remove o conteúdo anterior do mesmo usuário na equipe e, de
        passagem, todos os conteúdos já expirados.

        Args:
            user_id: ID do usuário dono do conteúdo
            team_id: ID da equipe
            data: dict com action_id, image_url, title, body, hashtags,
                brand, theme, original_id e revisions
        """
        if not TeamMembershipService.is_member(user_id, team_id):
            raise ActionPermissionDenied('User not found or not part of the team')

        TemporaryContent.objects.filter(user_id=user_id, team_id=team_id).delete()
        TemporaryContentService.cleanup_expired_temporary_content()

        content = TemporaryContent.objects.create(
            user_id=user_id,
            team_id=team_id,
            action_id=data.get('action_id'),
            image_url=data.get('image_url', ''),
            title=data.get('title', ''),
            body=data.get('body', ''),
            hashtags=data.get('hashtags') or [],
            brand=data.get('brand'),
            theme=data.get('theme'),
            original_id=data.get('original_id'),
            revisions=data.get('revisions', 0),
        )

        logger.info(f"Conteúdo temporário criado: {content.id}")
        return content

    @staticmethod
    def update_temporary_content(content_id, user_id, team_id, data):
        """Atualiza apenas os campos informados (valores vazios são ignorados)"""
        content = TemporaryContentService._owned(content_id, user_id, team_id)

        update_fields = []
        for field_name in EDITABLE_FIELDS:
            value = data.get(field_name)
            if value:
                setattr(content, field_name, value)
                update_fields.append(field_name)

        if data.get('revisions') is not None:
            content.revisions = data['revisions']
            update_fields.append('revisions')

        if update_fields:
            content.save(update_fields=update_fields + ['updated_at'])

        return content

    @staticmethod
    def delete_temporary_content(content_id, user_id, team_id):
        content = TemporaryContentService._owned(content_id, user_id, team_id)
        content.delete()

    @staticmethod
    def cleanup_expired_temporary_content(now=None):
        """
        Remove todos os conteúdos temporários com expires_at no passado

        Returns:
            int: quantidade de registros removidos
        """
        cutoff = now or timezone.now()
        deleted, _details = TemporaryContent.objects.filter(
            expires_at__lt=cutoff).delete()
        if deleted:
            logger.info(f"Removidos {deleted} conteúdos temporários expirados")
        return deleted
