"""
URL patterns for the content action lifecycle.
"""

from django.urls import path

from . import views

app_name = 'content_actions'

urlpatterns = [
    # Action management endpoints
    path('actions/', views.actions, name='action-list'),
    path('actions/<uuid:action_id>/', views.action_detail, name='action-detail'),

    # Lifecycle endpoints
    path('actions/<uuid:action_id>/approve/',
         views.approve_content, name='action-approve'),
    path('actions/<uuid:action_id>/review/',
         views.review_content, name='action-review'),

    # Quick create staging area
    path('temporary-content/', views.temporary_content,
         name='temporary-content'),

    # Cron endpoints
    path('cleanup/', views.cron_cleanup_temporary_content,
         name='cleanup-temporary-content'),
]
