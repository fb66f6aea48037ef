"""
URL configuration for Creator_REST_API project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),

    # Content action lifecycle endpoints
    path('api/v1/content/', include('ContentActions.urls')),

    # Team endpoints
    path('api/v1/teams/', include('Teams.urls')),
]
