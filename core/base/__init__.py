"""
Core Base Module

Shared mixins and managers.

Exports:
    - AuditMixin: created_at, updated_at, created_by, updated_by
    - VersionedMixin: effective_start_date, effective_end_date
    - VersionedQuerySet / VersionedManager: active_on() filtering

Import the mixins from core.base.models inside model modules; this package
does not import them eagerly so that it stays importable before the app
registry is ready.
"""
