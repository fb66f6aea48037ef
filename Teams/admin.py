from django.contrib import admin

from .models import Brand, Team


class BrandInline(admin.TabularInline):
    model = Brand
    extra = 0
    fields = ('name', 'responsible', 'segment')


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'admin',
                    'total_contents', 'total_brands', 'created_at']
    search_fields = ['name', 'code', 'admin__email']
    readonly_fields = ['id', 'total_contents', 'total_brands',
                       'created_at', 'updated_at']
    inlines = [BrandInline]

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('id', 'name', 'code', 'admin')
        }),
        ('Contadores', {
            'fields': ('total_contents', 'total_brands'),
        }),
        ('Metadados', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'team', 'responsible', 'segment', 'created_at']
    search_fields = ['name', 'team__name', 'responsible']
    readonly_fields = ['id', 'created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('team')
