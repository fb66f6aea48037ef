import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UNSUPPORTED_MEDIA_TYPE",
}

INTERNAL_ERROR_MESSAGE = "Um erro interno do servidor ocorreu, por favor tente novamente mais tarde."


def unified_exception_handler(exc, context):
    """
    DRF exception handler for every API error.

    Body: {
        "error": "Mensagem principal",
        "code": "NOT_FOUND",
        "errors": ["campo: detalhe", ...]
    }

    Domain errors raised by the lifecycle (ContentActionError) are APIException
    subclasses, so they land here with their own status code and message.
    """
    response = exception_handler(exc, context)
    if response is None:
        return _internal_error_response(exc, context)

    if isinstance(exc, ValidationError):
        code = "VALIDATION_ERROR"
    else:
        code = ERROR_CODES.get(response.status_code)
        if code is None:
            code = str(getattr(exc, 'default_code', 'API_ERROR')).upper()

    return JsonResponse({
        "error": _first_message(response.data) or str(exc),
        "code": code,
        "errors": list(_flatten_errors(response.data)),
    }, status=response.status_code)


def _internal_error_response(exc, context):
    view = context.get('view')
    view_name = view.__class__.__name__ if view else 'view'

    if isinstance(exc, (DjangoValidationError, ValueError)):
        logger.warning(f"Entrada inválida em {view_name}: {exc}")
        code = "VALIDATION_ERROR" if isinstance(exc, DjangoValidationError) else "VALUE_ERROR"
        return JsonResponse({
            "error": "Falha na validação",
            "code": code,
            "errors": [str(exc)],
        }, status=status.HTTP_400_BAD_REQUEST)

    logger.exception(f"Exceção não tratada em {view_name}: {exc}")
    return JsonResponse({
        "error": INTERNAL_ERROR_MESSAGE,
        "code": "INTERNAL_SERVER_ERROR",
        "errors": [],
    }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _first_message(data):
    """Pick the message a client should show first."""
    if isinstance(data, str):
        return data
    if isinstance(data, list):
        return _first_message(data[0]) if data else None
    if isinstance(data, dict):
        for key in ('detail', 'error', 'non_field_errors'):
            if key in data:
                return _first_message(data[key])
        for field_name, value in data.items():
            message = _first_message(value)
            if message:
                return f"{field_name}: {message}"
    return None


def _flatten_errors(data, prefix=''):
    """Yield "campo: mensagem" lines from nested DRF error data."""
    if isinstance(data, dict):
        for key, value in data.items():
            if key == 'detail':
                continue
            nested = prefix if key == 'non_field_errors' else (
                f"{prefix}.{key}" if prefix else key)
            yield from _flatten_errors(value, nested)
    elif isinstance(data, list):
        for item in data:
            yield from _flatten_errors(item, prefix)
    elif data is not None:
        yield f"{prefix}: {data}" if prefix else str(data)
