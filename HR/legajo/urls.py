"""
URL configuration for the legajo module.
"""
from django.urls import path

from . import views

app_name = 'legajo'

urlpatterns = [
    path('<int:persona_id>/recalcular/', views.legajo_recalcular, name='legajo_recalcular'),
    path('<int:persona_id>/estado/', views.legajo_estado, name='legajo_estado'),
    path('<int:persona_id>/plazo/', views.legajo_plazo, name='legajo_plazo'),
    path('<int:persona_id>/historial/', views.legajo_historial, name='legajo_historial'),
]
