"""
/auth/ routes: JWT login, the current account and token refresh.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import login, me

app_name = 'auth'

urlpatterns = [
    path('login/', login, name='login'),
    path('me/', me, name='me'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
]
