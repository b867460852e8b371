"""
Abstract bases shared by the legajo models.
"""
from django.conf import settings
from django.db import models


def _user_fk(suffix):
    return models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name=f'%(app_label)s_%(class)s_{suffix}',
    )


class AuditMixin(models.Model):
    """
    Who touched a legajo row and when.

    The services pass the acting user explicitly and call ``stamp`` before
    saving; there is no request-bound middleware filling these in.
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = _user_fk('created')
    updated_by = _user_fk('updated')

    class Meta:
        abstract = True

    def stamp(self, user):
        acting = user if getattr(user, 'is_authenticated', False) else None
        if self.pk is None and self.created_by_id is None:
            self.created_by = acting
        self.updated_by = acting
        return self


class VersionedMixin(models.Model):
    """Validity window [effective_start_date, effective_end_date); open ended when the end is NULL."""
    effective_start_date = models.DateField()
    effective_end_date = models.DateField(null=True, blank=True)

    class Meta:
        abstract = True
        ordering = ['-effective_start_date']
