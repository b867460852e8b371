from rest_framework import serializers
from .models import CustomUser
from core.job_roles.services import get_user_role_codes, get_user_persona_id


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class UserProfileSerializer(serializers.ModelSerializer):
    """Current user with roles and linked persona"""
    roles = serializers.SerializerMethodField()
    id_persona = serializers.SerializerMethodField()

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'kind', 'roles', 'id_persona']
        read_only_fields = fields

    def get_roles(self, obj):
        return sorted(code.upper() for code in get_user_role_codes(obj))

    def get_id_persona(self, obj):
        return get_user_persona_id(obj)
