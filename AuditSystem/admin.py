from django.contrib import admin

from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['timestamp', 'user', 'operation_category',
                    'action', 'status', 'resource_type', 'resource_id']
    list_filter = ['operation_category', 'action', 'status', 'timestamp']
    search_fields = ['user__email', 'resource_id', 'error_message', 'request_id']
    readonly_fields = [field.name for field in AuditLog._meta.fields]
