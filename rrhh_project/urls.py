"""
URL configuration for rrhh_project.

Personas and their sub-resources (documentos, domicilios, títulos, archivos)
live at the root; the legajo aggregate under legajo/.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('HR.person.urls')),
    path('legajo/', include('HR.legajo.urls')),
    path('notificaciones/', include('core.notifications.urls')),

    # Authentication endpoints (login, token refresh, current user)
    path('auth/', include('core.user_accounts.auth_urls')),
]
