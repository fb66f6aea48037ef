from django.urls import path

from . import views

app_name = 'teams'

urlpatterns = [
    path('initialize-counters/', views.initialize_team_counters,
         name='initialize-counters'),
]
