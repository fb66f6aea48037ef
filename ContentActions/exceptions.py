from rest_framework import status
from rest_framework.exceptions import APIException


class ContentActionError(APIException):
    """Base error for the content action lifecycle."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Erro ao processar a ação de conteúdo'
    default_code = 'CONTENT_ACTION_ERROR'

    @property
    def message(self):
        return str(self.detail)


class ActionNotFound(ContentActionError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Action não encontrada'
    default_code = 'NOT_FOUND'


class TemporaryContentNotFound(ContentActionError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'TemporaryContent não encontrado'
    default_code = 'NOT_FOUND'


class ActionPermissionDenied(ContentActionError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Sem permissão para esta ação'
    default_code = 'FORBIDDEN'


class TemporaryContentMismatch(ContentActionError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'TemporaryContent não corresponde à Action informada'
    default_code = 'CONFLICT'
