"""
Accounts of the legajo system.

Login is by email. What an account may do comes from its job roles
(core.job_roles); who it is comes from the HR persona linked to it. The
account kind only matters for the admin bypass.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.core.exceptions import PermissionDenied
from django.db import models


class AccountKind(models.TextChoices):
    USER = 'user', 'Usuario'
    ADMIN = 'admin', 'Administrador'
    SUPER_ADMIN = 'super_admin', 'Superadministrador'


ADMIN_KINDS = (AccountKind.ADMIN, AccountKind.SUPER_ADMIN)


class CustomUserManager(BaseUserManager):

    def create_user(self, email, name, password=None, kind=AccountKind.USER, **extra_fields):
        if not email:
            raise ValueError('El email es obligatorio')
        if not name:
            raise ValueError('El nombre es obligatorio')

        user = self.model(email=self.normalize_email(email), name=name, kind=kind, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        # used by createsuperuser
        return self.create_user(email, name, password, kind=AccountKind.SUPER_ADMIN, **extra_fields)

    def admins(self):
        return self.filter(kind__in=ADMIN_KINDS, is_active=True)


class CustomUser(AbstractBaseUser):
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)
    kind = models.CharField(max_length=20, choices=AccountKind.choices, default=AccountKind.USER)
    is_active = models.BooleanField(default=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'custom_users'
        verbose_name = 'Usuario'
        verbose_name_plural = 'Usuarios'

    def __str__(self):
        return f"{self.name} ({self.email})"

    def is_super_admin(self):
        return self.kind == AccountKind.SUPER_ADMIN

    def is_admin(self):
        """Admin accounts skip the page checks of job_roles."""
        return self.kind in ADMIN_KINDS

    def delete(self, *args, **kwargs):
        if self.is_super_admin():
            raise PermissionDenied("El superadministrador no se puede eliminar")
        return super().delete(*args, **kwargs)
