"""
Views for the content action lifecycle.
"""

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from AuditSystem.services import AuditService
from Teams.models import Brand
from Teams.services.team_counter_service import TeamCounterService
from Teams.services.team_membership_service import TeamMembershipService

from .exceptions import ContentActionError
from .models import Action, ActionStatus
from .serializers import (
    ActionCreateSerializer,
    ActionSerializer,
    ActionSummarySerializer,
    ActionUpdateSerializer,
    ApproveRequestSerializer,
    ReviewRequestSerializer,
    TemporaryContentCreateSerializer,
    TemporaryContentSerializer,
    TemporaryContentUpdateSerializer,
)
from .services.action_service import (
    approve_action,
    approve_generated_content,
    request_new_generation,
)
from .services.temporary_content_service import TemporaryContentService
from .services.transaction_service import lifecycle_transaction

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 20
MAX_LIST_LIMIT = 100
DEFAULT_SUMMARY_LIMIT = 3


def _forbidden(message='Sem permissão para esta ação'):
    return Response({'error': message}, status=status.HTTP_403_FORBIDDEN)


def _invalid(serializer):
    return Response(
        {'error': 'Dados inválidos', 'details': serializer.errors},
        status=status.HTTP_400_BAD_REQUEST
    )


def _resolve_requester(request, supplied_user_id):
    """
    The authenticated user is the requester. A user id sent by the client is
    accepted only when it names that same user.
    """
    if supplied_user_id is not None and str(supplied_user_id) != str(request.user.id):
        return None
    return request.user.id


def _action_with_relations(action_id, using='default'):
    return Action.objects.using(using).select_related('brand', 'user').get(pk=action_id)


def _parse_limit(raw, default, maximum=None):
    try:
        limit = int(raw) if raw else default
    except ValueError:
        limit = default
    limit = max(limit, 1)
    return min(limit, maximum) if maximum else limit


# Action management views

@api_view(['GET', 'POST'])
@permission_classes([permissions.IsAuthenticated])
def actions(request):
    """List a team's actions (GET) or register a new action (POST)."""
    if request.method == 'POST':
        return _create_action(request)

    params = request.query_params
    team_id = params.get('teamId')
    if not team_id:
        return Response({'error': 'teamId is required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        if not TeamMembershipService.is_member(request.user.id, team_id):
            return _forbidden('Usuário não pertence à equipe')

        queryset = Action.objects.filter(team_id=team_id)
        if params.get('userId'):
            queryset = queryset.filter(user_id=params['userId'])
        if params.get('status'):
            queryset = queryset.filter(status=params['status'])
        if params.get('type'):
            queryset = queryset.filter(type=params['type'])
        if params.get('approved') == 'true':
            queryset = queryset.filter(approved=True, status=ActionStatus.APPROVED)

        if params.get('count') == 'true':
            return Response({'count': queryset.count()})

        if params.get('summary') == 'true':
            limit = _parse_limit(params.get('limit'), DEFAULT_SUMMARY_LIMIT)
            queryset = queryset.select_related('brand').order_by('-created_at')[:limit]
            return Response(ActionSummarySerializer(queryset, many=True).data)

        limit = _parse_limit(params.get('limit'), DEFAULT_LIST_LIMIT, MAX_LIST_LIMIT)
        queryset = queryset.select_related('brand', 'user').order_by('-created_at')[:limit]
        return Response(ActionSerializer(queryset, many=True).data)

    except (DjangoValidationError, ValueError):
        return Response({'error': 'Parâmetros inválidos'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception:
        logger.exception("Erro ao buscar ações")
        return Response(
            {'error': 'Failed to fetch actions'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def _create_action(request):
    serializer = ActionCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid(serializer)

    data = serializer.validated_data
    user_id = _resolve_requester(request, data.get('userId'))
    if user_id is None:
        return _forbidden()

    team_id = data['teamId']
    if not TeamMembershipService.is_member(user_id, team_id):
        return _forbidden('User not found or not part of the team')
    if not Brand.objects.filter(id=data['brandId'], team_id=team_id).exists():
        return _forbidden('Brand not found or not part of the team')

    try:
        action = Action.objects.create(
            type=data['type'],
            team_id=team_id,
            user_id=user_id,
            brand_id=data['brandId'],
            details=data.get('details'),
            result=data.get('result'),
            status=ActionStatus.IN_REVIEW,
            approved=False,
            revisions=0,
        )
    except Exception:
        logger.exception("Erro ao criar ação")
        return Response(
            {'error': 'Failed to create action'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    AuditService.log_content_operation(
        user=request.user,
        action='content_created',
        status='success',
        resource_id=str(action.id),
        request=request,
        details={'type': action.type, 'team_id': str(team_id)}
    )

    return Response(
        ActionSerializer(_action_with_relations(action.id)).data,
        status=status.HTTP_201_CREATED
    )


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([permissions.IsAuthenticated])
def action_detail(request, action_id):
    """Retrieve, update and delete a single action."""
    action = Action.objects.select_related('brand', 'user').filter(pk=action_id).first()
    if action is None:
        return Response({'error': 'Ação não encontrada'}, status=status.HTTP_404_NOT_FOUND)

    if not TeamMembershipService.can_act_on(action.user_id, action.team_id, request.user.id):
        return _forbidden()

    if request.method == 'GET':
        return Response(ActionSerializer(action).data)

    if request.method == 'DELETE':
        was_approved = action.approved
        team_id = action.team_id
        with transaction.atomic():
            action.delete()
            if was_approved:
                transaction.on_commit(
                    lambda: TeamCounterService.decrement_content_counter(team_id))

        AuditService.log_content_operation(
            user=request.user,
            action='content_deleted',
            status='success',
            resource_id=str(action_id),
            request=request,
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    serializer = ActionUpdateSerializer(action, data=request.data, partial=True)
    if not serializer.is_valid():
        return _invalid(serializer)

    data = serializer.validated_data
    if action.approved and data.get('approved') is False:
        return Response(
            {'error': 'Uma ação aprovada não pode voltar a não aprovada'},
            status=status.HTTP_400_BAD_REQUEST
        )

    update_fields = []
    for field_name in ('result', 'status', 'approved', 'revisions'):
        if field_name in data:
            setattr(action, field_name, data[field_name])
            update_fields.append(field_name)

    if update_fields:
        action.save(update_fields=update_fields + ['updated_at'])

    return Response(ActionSerializer(action).data)


# Lifecycle views

@api_view(['POST'])
@permission_classes([permissions.IsAuthenticated])
def approve_content(request, action_id):
    """
    Approve an action.

    With temporaryContentId the staged candidate becomes the final result;
    without it the result already stored on the action is approved as-is.
    Approving twice returns the approved action unchanged.
    """
    serializer = ApproveRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid(serializer)

    requester_user_id = _resolve_requester(
        request, serializer.validated_data.get('requesterUserId'))
    if requester_user_id is None:
        return _forbidden('Sem permissão para aprovar esta ação')

    temporary_content_id = serializer.validated_data.get('temporaryContentId')
    logger.info(f"Aprovando conteúdo para ação: {action_id} (solicitante {requester_user_id})")

    try:
        with lifecycle_transaction() as using:
            if temporary_content_id:
                action = approve_generated_content(
                    action_id=action_id,
                    temporary_content_id=temporary_content_id,
                    requester_user_id=requester_user_id,
                    using=using,
                )
            else:
                action = approve_action(
                    action_id=action_id,
                    requester_user_id=requester_user_id,
                    using=using,
                )
            payload = ActionSerializer(_action_with_relations(action.pk, using)).data

    except ContentActionError as e:
        return Response({'error': e.message}, status=e.status_code)
    except Exception as e:
        logger.exception(f"Erro ao aprovar conteúdo da ação {action_id}")
        AuditService.log_content_operation(
            user=request.user,
            action='content_approval_failed',
            status='error',
            resource_id=str(action_id),
            request=request,
            error_message=str(e)
        )
        return Response(
            {'error': 'Failed to approve content'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    AuditService.log_content_operation(
        user=request.user,
        action='content_approved',
        status='success',
        resource_id=str(action_id),
        request=request,
        details={'temporary_content_id': temporary_content_id}
    )
    return Response(payload)


@api_view(['POST'])
@permission_classes([permissions.IsAuthenticated])
def review_content(request, action_id):
    """Stage a new candidate for the action and count one more revision."""
    serializer = ReviewRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid(serializer)

    data = serializer.validated_data
    requester_user_id = _resolve_requester(request, data.get('requesterUserId'))
    if requester_user_id is None:
        return _forbidden('Sem permissão para revisar esta ação')

    logger.info(f"Solicitando revisão para ação: {action_id} (solicitante {requester_user_id})")

    try:
        with lifecycle_transaction() as using:
            revision = request_new_generation(
                action_id=action_id,
                requester_user_id=requester_user_id,
                new_image_url=data.get('newImageUrl'),
                new_title=data.get('newTitle'),
                new_body=data.get('newBody'),
                new_hashtags=data.get('newHashtags'),
                using=using,
            )
            payload = {
                'action': ActionSerializer(
                    _action_with_relations(revision.action.pk, using)).data,
                'temporaryContent': TemporaryContentSerializer(
                    revision.temporary_content).data,
            }

    except ContentActionError as e:
        return Response({'error': e.message}, status=e.status_code)
    except Exception as e:
        logger.exception(f"Erro ao solicitar revisão da ação {action_id}")
        AuditService.log_content_operation(
            user=request.user,
            action='content_revision_failed',
            status='error',
            resource_id=str(action_id),
            request=request,
            error_message=str(e)
        )
        return Response(
            {'error': 'Failed to create review'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    AuditService.log_content_operation(
        user=request.user,
        action='content_revision_requested',
        status='success',
        resource_id=str(action_id),
        request=request,
        details={'revisions': payload['action']['revisions']}
    )
    return Response(payload)


# Temporary content (quick create flow)

@api_view(['GET', 'POST', 'PATCH', 'DELETE'])
@permission_classes([permissions.IsAuthenticated])
def temporary_content(request):
    """Staging area for the quick create flow, one active item per user and team."""
    handlers = {
        'GET': _get_temporary_content,
        'POST': _create_temporary_content,
        'PATCH': _update_temporary_content,
        'DELETE': _delete_temporary_content,
    }
    try:
        return handlers[request.method](request)
    except ContentActionError as e:
        return Response({'error': e.message}, status=e.status_code)
    except (DjangoValidationError, ValueError):
        return Response({'error': 'Parâmetros inválidos'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception:
        logger.exception(f"Erro no conteúdo temporário ({request.method})")
        return Response(
            {'error': 'Failed to process temporary content'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def _get_temporary_content(request):
    team_id = request.query_params.get('teamId')
    if not team_id:
        return Response({'error': 'teamId is required'}, status=status.HTTP_400_BAD_REQUEST)

    user_id = _resolve_requester(request, request.query_params.get('userId'))
    if user_id is None:
        return _forbidden()

    content = TemporaryContentService.get_active_temporary_content(user_id, team_id)
    if content is None:
        return Response(None)
    return Response(TemporaryContentSerializer(content).data)


def _create_temporary_content(request):
    serializer = TemporaryContentCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid(serializer)

    user_id = _resolve_requester(request, serializer.validated_data.get('userId'))
    if user_id is None:
        return _forbidden()

    content = TemporaryContentService.create_temporary_content(
        user_id=user_id,
        team_id=serializer.validated_data['teamId'],
        data=serializer.to_service_data(),
    )
    return Response(TemporaryContentSerializer(content).data, status=status.HTTP_201_CREATED)


def _update_temporary_content(request):
    serializer = TemporaryContentUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid(serializer)

    user_id = _resolve_requester(request, serializer.validated_data.get('userId'))
    if user_id is None:
        return _forbidden()

    content = TemporaryContentService.update_temporary_content(
        content_id=serializer.validated_data['id'],
        user_id=user_id,
        team_id=serializer.validated_data['teamId'],
        data=serializer.to_service_data(),
    )
    return Response(TemporaryContentSerializer(content).data)


def _delete_temporary_content(request):
    params = request.query_params
    content_id = params.get('id')
    team_id = params.get('teamId')
    if not content_id or not team_id:
        return Response(
            {'error': 'id and teamId are required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    user_id = _resolve_requester(request, params.get('userId'))
    if user_id is None:
        return _forbidden()

    TemporaryContentService.delete_temporary_content(content_id, user_id, team_id)
    return Response({'success': True})


# Cron views

@csrf_exempt
@require_http_methods(['POST'])
def cron_cleanup_temporary_content(request):
    """
    Cron endpoint removing expired temporary content.

    Requires CRON_SECRET for authentication. Safe to run at any time and
    concurrently with the lifecycle endpoints.
    """
    auth_header = request.headers.get('Authorization', '')
    expected = f"Bearer {settings.CRON_SECRET}"

    if not settings.CRON_SECRET or auth_header != expected:
        return JsonResponse({
            'error': 'Unauthorized'
        }, status=401)

    try:
        deleted = TemporaryContentService.cleanup_expired_temporary_content()

        AuditService.log_system_operation(
            user=None,
            action='temporary_content_cleanup',
            status='success',
            resource_type='TemporaryContent',
            details={'deleted_count': deleted}
        )

        return JsonResponse({
            'message': 'Cleanup completed',
            'deletedCount': deleted
        })

    except Exception as e:
        logger.exception("Erro na limpeza de conteúdos temporários")
        AuditService.log_system_operation(
            user=None,
            action='temporary_content_cleanup',
            status='error',
            resource_type='TemporaryContent',
            error_message=str(e)
        )
        return JsonResponse({
            'error': 'Failed to cleanup expired content'
        }, status=500)
