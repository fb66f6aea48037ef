from django.contrib import admin

from .models import Action, TemporaryContent


class TemporaryContentInline(admin.TabularInline):
    model = TemporaryContent
    extra = 0
    fields = ('title', 'user', 'revisions', 'expires_at')
    readonly_fields = ('title', 'user', 'revisions', 'expires_at')
    can_delete = False


@admin.register(Action)
class ActionAdmin(admin.ModelAdmin):
    list_display = ['id', 'type', 'status', 'approved', 'revisions',
                    'team', 'brand', 'user', 'created_at']
    list_filter = ['type', 'status', 'approved', 'created_at']
    search_fields = ['id', 'team__name', 'brand__name', 'user__email']
    readonly_fields = ['id', 'type', 'created_at', 'updated_at']
    inlines = [TemporaryContentInline]

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('id', 'type', 'team', 'brand', 'user')
        }),
        ('Ciclo de Vida', {
            'fields': ('status', 'approved', 'revisions')
        }),
        ('Conteúdo', {
            'fields': ('result', 'details'),
            'classes': ('collapse',)
        }),
        ('Metadados', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('team', 'brand', 'user')


@admin.register(TemporaryContent)
class TemporaryContentAdmin(admin.ModelAdmin):
    list_display = ['id', 'action', 'user', 'team', 'revisions',
                    'expires_at', 'created_at']
    list_filter = ['expires_at', 'created_at']
    search_fields = ['id', 'title', 'user__email', 'team__name']
    readonly_fields = ['id', 'created_at', 'updated_at']
