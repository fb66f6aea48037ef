from django.db import DEFAULT_DB_ALIAS

from Creator_REST_API.Users.models import UserProfile


class TeamMembershipService:
    """
    Consultas ao diretório de equipes usadas nas verificações de permissão
    """

    @staticmethod
    def is_member(user_id, team_id, using=DEFAULT_DB_ALIAS):
        """Verifica se o usuário pertence à equipe informada"""
        if user_id is None or team_id is None:
            return False
        return UserProfile.objects.using(using).filter(
            user_id=user_id,
            team_id=team_id
        ).exists()

    @staticmethod
    def can_act_on(owner_user_id, team_id, requester_user_id, using=DEFAULT_DB_ALIAS):
        """
        O criador original sempre pode agir sobre o recurso; qualquer outro
        solicitante precisa pertencer à mesma equipe.
        """
        if requester_user_id is None:
            return True
        if str(owner_user_id) == str(requester_user_id):
            return True
        return TeamMembershipService.is_member(requester_user_id, team_id, using=using)
