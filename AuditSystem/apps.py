from django.apps import AppConfig


class AuditSystemConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'AuditSystem'
    verbose_name = 'Auditoria'
