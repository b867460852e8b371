"""
Queryset helpers for date-ranged rows (see VersionedMixin).
"""
from django.db import models
from django.db.models import Q


class VersionedQuerySet(models.QuerySet):

    def active_on(self, day):
        open_or_later = Q(effective_end_date__isnull=True) | Q(effective_end_date__gt=day)
        return self.filter(Q(effective_start_date__lte=day) & open_or_later)


# UserJobRole.objects.active_on(today).filter(user=user)
VersionedManager = models.Manager.from_queryset(VersionedQuerySet)
