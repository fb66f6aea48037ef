from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile, UserRole, UserStatus


class TeamMembershipInline(admin.StackedInline):
    """Equipe e papel do usuário, editáveis na própria página do User."""
    model = UserProfile
    can_delete = False
    verbose_name_plural = 'Equipe'
    fields = ('team', 'role', 'status', 'tutorial_completed')
    autocomplete_fields = ('team',)


class UserAdmin(BaseUserAdmin):
    inlines = (TeamMembershipInline,)
    list_display = BaseUserAdmin.list_display + ('team_name',)
    list_select_related = ('profile__team',)

    @admin.display(description='Equipe', ordering='profile__team__name')
    def team_name(self, obj):
        profile = getattr(obj, 'profile', None)
        team = profile.team if profile else None
        return team.name if team else '-'


admin.site.unregister(User)
admin.site.register(User, UserAdmin)


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'team', 'role', 'status', 'updated_at']
    list_filter = ['role', 'status', 'team']
    search_fields = ['user__username', 'user__email', 'team__name', 'team__code']
    readonly_fields = ['created_at', 'updated_at']
    list_select_related = ['user', 'team']
    actions = ['remove_from_team']

    @admin.action(description='Remover da equipe')
    def remove_from_team(self, request, queryset):
        # Actions keep pointing at the team; only the membership is dropped
        updated = queryset.update(
            team=None, role=UserRole.WITHOUT_TEAM, status=UserStatus.NO_TEAM)
        self.message_user(
            request, f"{updated} usuário(s) removido(s) da equipe", messages.SUCCESS)
