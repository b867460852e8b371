"""
Core System Configuration - Hardcoded Setup
============================================

Defines the foundational structure for the permission system:
- 4 standard actions: view, create, edit, delete
- pages of the personnel dossier (legajo) module
- 4 job roles: admin, rrhh, administrativo, empleado

This data is used by the init_core_data command to populate the database.
"""

# ============================================================================
# ACTIONS
# ============================================================================

class CoreActions:
    """Standard action identifiers."""
    VIEW = 'view'
    CREATE = 'create'
    EDIT = 'edit'
    DELETE = 'delete'


CORE_ACTIONS = [
    {'code': 'view', 'name': 'View', 'description': 'View and read records'},
    {'code': 'create', 'name': 'Create', 'description': 'Create new records'},
    {'code': 'edit', 'name': 'Edit', 'description': 'Edit and update existing records'},
    {'code': 'delete', 'name': 'Delete', 'description': 'Delete records'},
]

ALL_ACTIONS = ['view', 'create', 'edit', 'delete']


# ============================================================================
# PAGES
# ============================================================================

class CorePages:
    """Page identifiers used by require_page_action."""
    USER_MANAGEMENT = 'user_management'
    PERSONAS = 'hr_personas'
    DOCUMENTOS = 'hr_documentos'
    DOMICILIOS = 'hr_domicilios'
    TITULOS = 'hr_titulos'
    ARCHIVOS = 'hr_archivos'
    LEGAJO = 'hr_legajo'
    LEGAJO_ADMIN = 'hr_legajo_admin'
    VERIFICACION = 'hr_verificacion'
    ELIMINACIONES = 'hr_eliminaciones'


CORE_PAGES = [
    {
        'code': 'user_management',
        'name': 'User Management',
        'description': 'Manage user accounts and role assignments',
        'module_code': 'core',
        'sort_order': 10,
        'actions': ALL_ACTIONS,
    },
    {
        'code': 'hr_personas',
        'name': 'Personas',
        'description': 'Personal data and identification of staff',
        'module_code': 'hr',
        'sort_order': 100,
        'actions': ALL_ACTIONS,
    },
    {
        'code': 'hr_documentos',
        'name': 'Documentos',
        'description': 'Documents attached to a persona',
        'module_code': 'hr',
        'sort_order': 110,
        'actions': ALL_ACTIONS,
    },
    {
        'code': 'hr_domicilios',
        'name': 'Domicilios',
        'description': 'Addresses and barrio assignments',
        'module_code': 'hr',
        'sort_order': 120,
        'actions': ALL_ACTIONS,
    },
    {
        'code': 'hr_titulos',
        'name': 'Títulos',
        'description': 'Academic and professional titles',
        'module_code': 'hr',
        'sort_order': 130,
        'actions': ALL_ACTIONS,
    },
    {
        'code': 'hr_archivos',
        'name': 'Archivos',
        'description': 'Uploaded files and previews',
        'module_code': 'hr',
        'sort_order': 140,
        'actions': ['view', 'create'],
    },
    {
        'code': 'hr_legajo',
        'name': 'Legajo',
        'description': 'Dossier status and recalculation',
        'module_code': 'hr',
        'sort_order': 150,
        'actions': ['view', 'create'],
    },
    {
        'code': 'hr_legajo_admin',
        'name': 'Legajo (administración)',
        'description': 'Manual dossier status and grace periods',
        'module_code': 'hr',
        'sort_order': 160,
        'actions': ['view', 'create', 'edit'],
    },
    {
        'code': 'hr_verificacion',
        'name': 'Verificación',
        'description': 'Verification state of documents and titles',
        'module_code': 'hr',
        'sort_order': 170,
        'actions': ['view', 'edit'],
    },
    {
        'code': 'hr_eliminaciones',
        'name': 'Solicitudes de eliminación',
        'description': 'Review of deletion requests',
        'module_code': 'hr',
        'sort_order': 180,
        'actions': ['view', 'edit'],
    },
]


# ============================================================================
# JOB ROLES
# ============================================================================

class CoreRoles:
    """Core role identifiers."""
    ADMIN = 'admin'
    RRHH = 'rrhh'
    ADMINISTRATIVO = 'administrativo'
    EMPLEADO = 'empleado'


# Roles that may choose the verification state on creation and delete any
# document or title.
PRIVILEGED_ROLES = (CoreRoles.ADMIN, CoreRoles.RRHH, CoreRoles.ADMINISTRATIVO)

# Roles that review: verification, manual legajo state, deletion requests.
REVIEWER_ROLES = (CoreRoles.ADMIN, CoreRoles.RRHH)

_SELF_SERVICE_PAGES = [
    'hr_personas', 'hr_documentos', 'hr_domicilios', 'hr_titulos',
    'hr_archivos', 'hr_legajo',
]

CORE_JOB_ROLES = [
    {
        'code': 'admin',
        'name': 'Admin',
        'description': 'Administrator with full access',
        'pages': 'ALL',  # admin gets every page
    },
    {
        'code': 'rrhh',
        'name': 'RRHH',
        'description': 'Human resources staff, reviews dossiers',
        'pages': _SELF_SERVICE_PAGES + [
            'hr_legajo_admin', 'hr_verificacion', 'hr_eliminaciones',
        ],
    },
    {
        'code': 'administrativo',
        'name': 'Administrativo',
        'description': 'Administrative staff, loads dossiers',
        'pages': list(_SELF_SERVICE_PAGES),
    },
    {
        'code': 'empleado',
        'name': 'Empleado',
        'description': 'Employee managing their own dossier',
        'pages': list(_SELF_SERVICE_PAGES),
    },
]
