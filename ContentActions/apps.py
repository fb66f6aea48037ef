from django.apps import AppConfig


class ContentActionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ContentActions'
    verbose_name = 'Ações de Conteúdo'
