from django.urls import path

from . import views

app_name = 'notificaciones'

urlpatterns = [
    path('', views.notificacion_list, name='notificacion_list'),
    path('marcar-todas-leidas/', views.notificacion_leer_todas, name='notificacion_leer_todas'),
    path('<int:pk>/', views.notificacion_detail, name='notificacion_detail'),
    path('<int:pk>/leer/', views.notificacion_leer, name='notificacion_leer'),
]
