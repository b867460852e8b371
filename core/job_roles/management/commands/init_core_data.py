"""
Seed the access catalog of the legajo module from core_config.

    python manage.py init_core_data

Rows are matched by code, so running it again only fills what is missing.
Names and descriptions of existing rows are left alone unless --sync is
passed; grants are only ever added.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from core.job_roles.core_config import CORE_ACTIONS, CORE_JOB_ROLES, CORE_PAGES
from core.job_roles.models import Action, JobRole, JobRolePage, Page, PageAction


class Command(BaseCommand):
    help = 'Seed actions, legajo pages and job roles (admin, rrhh, administrativo, empleado)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--sync',
            action='store_true',
            help='Overwrite names and descriptions of existing rows with the configured ones',
        )

    def handle(self, *args, **options):
        self.verbose = options['verbosity'] > 0
        self.sync = options['sync']

        with transaction.atomic():
            actions = self._upsert_all(Action, CORE_ACTIONS, ('name', 'description'))
            pages = self._upsert_all(
                Page, CORE_PAGES, ('name', 'description', 'module_code', 'sort_order')
            )
            roles = self._upsert_all(JobRole, CORE_JOB_ROLES, ('name', 'description'))
            self._grant_page_actions()
            self._grant_role_pages()

        if self.verbose:
            self.stdout.write(self.style.SUCCESS(
                f'Catálogo listo: {actions} acciones, {pages} páginas y {roles} roles nuevos'
            ))

    def _upsert_all(self, model, rows, fields):
        created_count = 0
        for row in rows:
            values = {field: row[field] for field in fields}
            if self.sync:
                obj, created = model.objects.update_or_create(code=row['code'], defaults=values)
            else:
                obj, created = model.objects.get_or_create(code=row['code'], defaults=values)
            if created:
                created_count += 1
                self._log(f'  + {model._meta.model_name} {obj.code}')
        return created_count

    def _grant_page_actions(self):
        actions = {action.code: action for action in Action.objects.all()}
        for row in CORE_PAGES:
            page = Page.objects.get(code=row['code'])
            for code in row['actions']:
                PageAction.objects.get_or_create(page=page, action=actions[code])

    def _grant_role_pages(self):
        for row in CORE_JOB_ROLES:
            role = JobRole.objects.get(code=row['code'])
            pages = Page.objects.all()
            if row['pages'] != 'ALL':
                pages = pages.filter(code__in=row['pages'])
            for page in pages:
                JobRolePage.objects.get_or_create(job_role=role, page=page)

    def _log(self, message):
        if self.verbose:
            self.stdout.write(message)
