import logging
import uuid
from typing import Any, Dict, Optional, Tuple

from django.contrib.auth.models import User
from django.http import HttpRequest

from .models import AuditCategory, AuditLog, AuditStatus

logger = logging.getLogger(__name__)


def client_metadata(request: Optional[HttpRequest]) -> Tuple[Optional[str], str, str]:
    """
    Extract (ip_address, user_agent, request_id) from a request.

    The first X-Forwarded-For hop wins over REMOTE_ADDR. A client-supplied
    X-Request-ID is reused so entries can be matched with proxy logs.
    """
    if request is None:
        return None, '', str(uuid.uuid4())

    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    ip_address = forwarded.split(',')[0].strip() if forwarded else request.META.get('REMOTE_ADDR')
    user_agent = request.META.get('HTTP_USER_AGENT', '')
    request_id = request.META.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())
    return ip_address, user_agent, request_id[:100]


class AuditService:
    """
    Registro de auditoria das operações de conteúdo, equipe e sistema.

    Auditar nunca interrompe a operação auditada: se a gravação falhar o erro
    vai para o log e o método retorna None.
    """

    @staticmethod
    def log_operation(
        user: Optional[User],
        operation_category: str,
        action: str,
        status: str = AuditStatus.SUCCESS,
        resource_type: str = '',
        resource_id: str = '',
        details: Optional[Dict[str, Any]] = None,
        error_message: str = '',
        request: Optional[HttpRequest] = None,
        request_id: Optional[str] = None
    ) -> Optional[AuditLog]:
        ip_address, user_agent, generated_request_id = client_metadata(request)

        # AnonymousUser and other non-persisted users are recorded as the system
        if user is not None and not getattr(user, 'is_authenticated', False):
            user = None

        try:
            return AuditLog.objects.create(
                user=user,
                operation_category=operation_category,
                action=action,
                status=status,
                resource_type=resource_type,
                resource_id=resource_id,
                ip_address=ip_address,
                user_agent=user_agent,
                details=details or {},
                error_message=error_message,
                request_id=request_id or generated_request_id,
            )
        except Exception as e:
            logger.error(f"Falha ao registrar auditoria '{action}': {e}")
            return None

    @staticmethod
    def log_content_operation(user, action, status=AuditStatus.SUCCESS, **kwargs):
        """Operações sobre Actions (criação, aprovação, revisão, remoção)"""
        kwargs.setdefault('resource_type', 'Action')
        return AuditService.log_operation(
            user, AuditCategory.CONTENT, action, status=status, **kwargs)

    @staticmethod
    def log_team_operation(user, action, status=AuditStatus.SUCCESS, **kwargs):
        kwargs.setdefault('resource_type', 'Team')
        return AuditService.log_operation(
            user, AuditCategory.TEAM, action, status=status, **kwargs)

    @staticmethod
    def log_system_operation(user, action, status=AuditStatus.SUCCESS, **kwargs):
        """Rotinas de manutenção disparadas por cron ou comandos"""
        return AuditService.log_operation(
            user, AuditCategory.SYSTEM, action, status=status, **kwargs)
