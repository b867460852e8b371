"""
Job Roles and Permissions Models
Role-based access control at page level.

A user holds one or more job roles (UserJobRole, date-ranged). A role grants
pages (JobRolePage); a granted page allows every action defined for it
(PageAction).
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from core.base.managers import VersionedManager
from core.base.models import VersionedMixin


class JobRole(models.Model):
    """
    Role held by users of the system (admin, rrhh, administrativo, empleado).
    """
    code = models.CharField(max_length=50, unique=True, db_index=True)
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'job_roles'
        verbose_name = 'Job Role'
        verbose_name_plural = 'Job Roles'
        ordering = ['name']

    def __str__(self):
        return self.name

    def delete(self, *args, **kwargs):
        """Prevent deletion while the role is assigned to users."""
        if self.user_assignments.exists():
            raise ValidationError(
                f"Cannot delete job role '{self.name}' because it is assigned to "
                f"{self.user_assignments.count()} user(s)"
            )
        return super().delete(*args, **kwargs)


class Page(models.Model):
    """
    Functional area of the system (e.g. 'hr_documentos').
    """
    code = models.CharField(
        max_length=100,
        unique=True,
        db_index=True,
        help_text="Unique identifier for the page (e.g., 'hr_documentos')"
    )
    name = models.CharField(max_length=255, help_text="Human-readable name")
    description = models.TextField(blank=True, null=True)
    module_code = models.CharField(max_length=50, default='core')
    sort_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pages'
        verbose_name = 'Page'
        verbose_name_plural = 'Pages'
        ordering = ['sort_order', 'code']

    def __str__(self):
        return f"{self.name} ({self.code})"


class Action(models.Model):
    """
    Operation performed on a page: view, create, edit, delete.
    """
    code = models.CharField(max_length=50, unique=True, db_index=True)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'actions'
        verbose_name = 'Action'
        verbose_name_plural = 'Actions'
        ordering = ['code']

    def __str__(self):
        return f"{self.name} ({self.code})"


class PageAction(models.Model):
    """
    Actions available on each page.
    """
    page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='page_actions')
    action = models.ForeignKey(Action, on_delete=models.CASCADE, related_name='page_actions')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'page_actions'
        verbose_name = 'Page Action'
        verbose_name_plural = 'Page Actions'
        unique_together = ('page', 'action')
        ordering = ['page__sort_order', 'action__code']

    def __str__(self):
        return f"{self.page.code} - {self.action.code}"


class JobRolePage(models.Model):
    """
    Pages a job role can access.
    """
    job_role = models.ForeignKey(JobRole, on_delete=models.CASCADE, related_name='job_role_pages')
    page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='job_roles')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'job_role_pages'
        verbose_name = 'Job Role Page'
        verbose_name_plural = 'Job Role Pages'
        unique_together = ('job_role', 'page')
        ordering = ['job_role__name', 'page__sort_order']

    def __str__(self):
        return f"{self.job_role.code} - {self.page.code}"


class UserJobRole(VersionedMixin, models.Model):
    """
    Date-ranged assignment of a job role to a user.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='job_role_assignments'
    )
    job_role = models.ForeignKey(
        JobRole,
        on_delete=models.PROTECT,
        related_name='user_assignments'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = VersionedManager()

    class Meta:
        db_table = 'user_job_roles'
        verbose_name = 'User Job Role'
        verbose_name_plural = 'User Job Roles'
        ordering = ['-effective_start_date']
        indexes = [
            models.Index(fields=['user', 'job_role'], name='user_job_role_lookup_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.job_role.code}"
