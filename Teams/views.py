import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from AuditSystem.services import AuditService

from .models import Team
from .services.team_counter_service import TeamCounterService

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([permissions.IsAdminUser])
def initialize_team_counters(request):
    """
    Recalcula os contadores de uma equipe específica ou de todas as equipes.

    Body: {"teamId": "<uuid>"} (opcional)
    """
    team_id = request.data.get('teamId')

    try:
        if team_id:
            if not Team.objects.filter(id=team_id).exists():
                return Response(
                    {'error': 'Equipe não encontrada'},
                    status=status.HTTP_404_NOT_FOUND
                )

            counters = TeamCounterService.recalculate_team_counters(team_id)

            AuditService.log_team_operation(
                user=request.user,
                action='team_counters_initialized',
                status='success',
                resource_id=str(team_id),
                request=request,
                details=counters
            )

            return Response({
                'teamId': str(team_id),
                'totalContents': counters['total_contents'],
                'totalBrands': counters['total_brands'],
                'message': 'Contadores atualizados com sucesso'
            })

        results = TeamCounterService.initialize_all_team_counters()

        AuditService.log_team_operation(
            user=request.user,
            action='team_counters_initialized',
            status='success',
            request=request,
            details={'teams': len(results)}
        )

        return Response({
            'results': [
                {
                    'teamId': str(item['team_id']),
                    'totalContents': item['total_contents'],
                    'totalBrands': item['total_brands'],
                }
                for item in results
            ],
            'message': f'Contadores inicializados para {len(results)} equipes'
        })

    except DjangoValidationError:
        return Response(
            {'error': 'teamId inválido'},
            status=status.HTTP_400_BAD_REQUEST
        )
    except Exception as e:
        logger.exception("Erro ao inicializar contadores")
        AuditService.log_team_operation(
            user=request.user,
            action='team_counters_initialized',
            status='error',
            request=request,
            error_message=str(e)
        )
        return Response(
            {'error': 'Falha ao inicializar contadores'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
