"""
URL configuration for HR Person module.
"""
from django.urls import path

from . import views

app_name = 'person'

urlpatterns = [
    # Persona endpoints
    path('personas/', views.persona_list, name='persona_list'),
    path('personas/<int:persona_id>/', views.persona_detail, name='persona_detail'),
    path('personas/<int:persona_id>/identificacion/', views.persona_identificacion, name='persona_identificacion'),

    # Documento endpoints
    path('personas/<int:persona_id>/documentos/', views.documento_list, name='documento_list'),
    path('personas/<int:persona_id>/documentos/<int:documento_id>/', views.documento_delete, name='documento_delete'),
    path('documentos/tipos/', views.tipo_documento_list, name='tipo_documento_list'),
    path('documentos/<int:pk>/estado/', views.documento_estado, name='documento_estado'),
    path('documentos/<int:pk>/solicitar-eliminacion/', views.documento_solicitar_eliminacion,
         name='documento_solicitar_eliminacion'),

    # Domicilio and barrio endpoints
    path('personas/<int:persona_id>/domicilios/', views.domicilio_list, name='domicilio_list'),
    path('personas/<int:persona_id>/domicilios/<int:domicilio_id>/', views.domicilio_delete, name='domicilio_delete'),
    path('domicilios/<int:pk>/solicitar-eliminacion/', views.domicilio_solicitar_eliminacion,
         name='domicilio_solicitar_eliminacion'),
    path('personas/<int:persona_id>/barrios/', views.persona_barrio_list, name='persona_barrio_list'),
    path('personas/<int:persona_id>/barrios/<int:barrio_id>/', views.persona_barrio_delete,
         name='persona_barrio_delete'),
    path('dom-otros/departamentos/', views.departamento_list, name='departamento_list'),
    path('dom-otros/localidades/', views.localidad_list, name='localidad_list'),
    path('dom-otros/localidades/<int:localidad_id>/barrios/', views.localidad_barrio_list,
         name='localidad_barrio_list'),

    # Titulo endpoints
    path('titulos/', views.titulo_list, name='titulo_list'),
    path('titulos/tipos/', views.tipo_titulo_list, name='tipo_titulo_list'),
    path('titulos/<int:pk>/estado/', views.titulo_estado, name='titulo_estado'),
    path('titulos/<int:pk>/solicitar-eliminacion/', views.titulo_solicitar_eliminacion,
         name='titulo_solicitar_eliminacion'),
    path('personas/<int:persona_id>/titulos/<int:titulo_id>/', views.titulo_delete, name='titulo_delete'),

    # Archivo endpoints
    path('archivos/persona/<int:persona_id>/', views.archivo_upload, name='archivo_upload'),
    path('archivos/<int:pk>/signed-url/', views.archivo_signed_url, name='archivo_signed_url'),
    path('archivos/descargar/<str:token>/', views.archivo_descargar, name='archivo_descargar'),

    # Catalogues and review
    path('estados-verificacion/', views.estado_verificacion_list, name='estado_verificacion_list'),
    path('eliminaciones/', views.eliminacion_list, name='eliminacion_list'),
]
