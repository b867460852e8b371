"""
HTTP client for the RRHH legajo API.

Centralises every call the workflow layer makes:
- unwraps the {status, message, data} envelope and paginated lists
- maps HTTP errors to the ApiError hierarchy
- explicit timeouts, JWT bearer authentication
"""
import logging
from typing import Any, Optional

import requests
from requests.exceptions import ConnectionError, Timeout

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


# =========================================================
# EXCEPTIONS
# =========================================================

class ApiError(Exception):
    """Base error for every failed API call."""

    def __init__(self, message: str = '', status_code: Optional[int] = None,
                 details: Optional[list] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or []
        self.payload = payload


class ApiValidationError(ApiError):
    """Server side validation failure (400 / 422)."""


class ApiConflictError(ApiError):
    """Business rule conflict (409)."""


class ApiPermissionError(ApiError):
    """Not authenticated (401) or not allowed (403)."""


class NotFoundError(ApiError):
    """Resource not found (404)."""


class ServerError(ApiError):
    """Internal server error (5xx)."""


class ApiConnectionError(ApiError):
    """Timeout or connection failure, no response from the server."""


_ERRORS_BY_STATUS = {
    400: ApiValidationError,
    401: ApiPermissionError,
    403: ApiPermissionError,
    404: NotFoundError,
    409: ApiConflictError,
    422: ApiValidationError,
}


def error_items(body) -> list:
    """
    Itemised messages of an error body.

    Understands the envelope "details" list, a "missingFields" list and
    plain field dicts ({"calle": ["Requerido"]}).
    """
    if not isinstance(body, dict):
        return [str(body)] if body else []

    items = [str(item) for item in body.get('details') or []]
    for field in body.get('missingFields') or []:
        items.append(f'{field}: campo requerido')
    if items:
        return items

    for field, value in body.items():
        if field in ('status', 'message', 'data', 'error', 'detalle', 'detail'):
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        items.extend(f'{field}: {v}' for v in values if v not in (None, ''))
    return items


def error_message(body) -> str:
    """Main message of an error body ('' when there is none)."""
    if not isinstance(body, dict):
        return str(body) if body else ''
    for key in ('message', 'detalle', 'error', 'detail'):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return '; '.join(error_items(body))


def unwrap(body):
    """data of a {status, message, data} envelope; other bodies untouched."""
    if isinstance(body, dict) and 'status' in body and 'data' in body:
        return body['data']
    return body


def as_list(data) -> list:
    """Rows of a list payload, paginated ({results: [...]}) or not."""
    if isinstance(data, dict) and 'results' in data:
        return list(data['results'])
    if isinstance(data, list):
        return data
    return []


class RRHHClient:
    """Client for the legajo endpoints of the RRHH backend."""

    def __init__(self, base_url: str = 'http://localhost:8000', token: Optional[str] = None,
                 timeout: float = 30, session=None):
        """
        Args:
            base_url: root URL of the backend
            token: JWT access token (sent as "Bearer <token>")
            timeout: seconds per request
            session: requests.Session compatible object
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        if token:
            self.set_token(token)

    def set_token(self, token: str):
        self.session.headers['Authorization'] = f'Bearer {token}'

    # =========================================
    # TRANSPORT
    # =========================================

    def request(self, method: str, path: str, **kwargs):
        """
        Issue a request and return the unwrapped data.

        Raises:
            ApiError subclasses for HTTP errors, ApiConnectionError when
            the server does not answer.
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except Timeout:
            raise ApiConnectionError(f'Tiempo de espera agotado ({self.timeout}s) en {method} {path}')
        except ConnectionError:
            raise ApiConnectionError(f'No se pudo conectar con {self.base_url}')

        if response.status_code == 204 or not response.content:
            body = None
        else:
            try:
                body = response.json()
            except ValueError:
                body = response.text

        if response.status_code >= 400:
            raise self._error(response.status_code, body, method, path)
        return unwrap(body)

    def _error(self, status_code, body, method, path) -> ApiError:
        if status_code >= 500:
            error_class = ServerError
        else:
            error_class = _ERRORS_BY_STATUS.get(status_code, ApiError)
        message = error_message(body)
        logger.info(f"{method} {path} -> {status_code}: {message}")
        return error_class(message, status_code=status_code, details=error_items(body), payload=body)

    def get(self, path, params=None):
        return self.request('GET', path, params=params)

    def post(self, path, json=None, files=None):
        if files is not None:
            return self.request('POST', path, files=files)
        return self.request('POST', path, json=json if json is not None else {})

    def patch(self, path, json=None):
        return self.request('PATCH', path, json=json or {})

    def delete(self, path):
        return self.request('DELETE', path)

    def get_list(self, path, params=None) -> list:
        query = {'page_size': DEFAULT_PAGE_SIZE}
        query.update(params or {})
        return as_list(self.get(path, params=query))

    # =========================================
    # AUTH
    # =========================================

    def login(self, email: str, password: str) -> dict:
        """Log in and keep the access token for the following calls."""
        data = self.post('auth/login/', {'email': email, 'password': password})
        self.set_token(data['tokens']['access'])
        return data

    # =========================================
    # PERSONAS
    # =========================================

    def get_persona(self, persona_id) -> dict:
        return self.get(f'personas/{persona_id}/')

    def create_persona(self, payload: dict) -> dict:
        return self.post('personas/', payload)

    def update_persona(self, persona_id, payload: dict) -> dict:
        return self.patch(f'personas/{persona_id}/', payload)

    def get_identificacion(self, persona_id):
        return self.get(f'personas/{persona_id}/identificacion/')

    def set_identificacion(self, persona_id, dni, cuil) -> dict:
        return self.post(f'personas/{persona_id}/identificacion/', {'dni': dni, 'cuil': cuil})

    # =========================================
    # DOCUMENTOS
    # =========================================

    def list_documentos(self, persona_id, solo_vigentes=False) -> list:
        params = {'vigentes': 1} if solo_vigentes else None
        return self.get_list(f'personas/{persona_id}/documentos/', params)

    def create_documento(self, persona_id, payload: dict) -> dict:
        return self.post(f'personas/{persona_id}/documentos/', payload)

    def change_documento_estado(self, documento_id, estado, observacion='') -> dict:
        return self.patch(f'documentos/{documento_id}/estado/', {
            'id_estado_verificacion': estado,
            'observacion': observacion,
        })

    def delete_documento(self, persona_id, documento_id) -> dict:
        return self.delete(f'personas/{persona_id}/documentos/{documento_id}/')

    def solicitar_eliminacion_documento(self, documento_id, motivo=None) -> dict:
        return self.post(f'documentos/{documento_id}/solicitar-eliminacion/', {'motivo': motivo})

    def list_tipos_documento(self) -> list:
        return self.get_list('documentos/tipos/')

    def list_estados_verificacion(self) -> list:
        return self.get_list('estados-verificacion/')

    # =========================================
    # DOMICILIOS
    # =========================================

    def list_domicilios(self, persona_id) -> list:
        return self.get_list(f'personas/{persona_id}/domicilios/')

    def create_domicilio(self, persona_id, payload: dict) -> dict:
        return self.post(f'personas/{persona_id}/domicilios/', payload)

    def delete_domicilio(self, persona_id, domicilio_id) -> dict:
        return self.delete(f'personas/{persona_id}/domicilios/{domicilio_id}/')

    def solicitar_eliminacion_domicilio(self, domicilio_id, motivo=None) -> dict:
        return self.post(f'domicilios/{domicilio_id}/solicitar-eliminacion/', {'motivo': motivo})

    def assign_barrio(self, persona_id, barrio_id) -> dict:
        return self.post(f'personas/{persona_id}/barrios/', {'id_dom_barrio': barrio_id})

    def list_departamentos(self) -> list:
        return self.get_list('dom-otros/departamentos/')

    def list_localidades(self, departamento_id=None) -> list:
        params = {'depto': departamento_id} if departamento_id else None
        return self.get_list('dom-otros/localidades/', params)

    def list_barrios(self, localidad_id) -> list:
        return self.get_list(f'dom-otros/localidades/{localidad_id}/barrios/')

    def create_barrio(self, localidad_id, payload: dict) -> dict:
        return self.post(f'dom-otros/localidades/{localidad_id}/barrios/', payload)

    def list_barrios_persona(self, persona_id) -> list:
        return self.get_list(f'personas/{persona_id}/barrios/')

    def unassign_barrio(self, persona_id, barrio_id):
        return self.delete(f'personas/{persona_id}/barrios/{barrio_id}/')

    # =========================================
    # TITULOS
    # =========================================

    def list_titulos(self, persona_id) -> list:
        return self.get_list('titulos/', {'persona': persona_id})

    def list_tipos_titulo(self) -> list:
        return self.get_list('titulos/tipos/')

    def create_titulo(self, payload: dict) -> dict:
        return self.post('titulos/', payload)

    def change_titulo_estado(self, titulo_id, estado, observacion='') -> dict:
        return self.patch(f'titulos/{titulo_id}/estado/', {
            'id_estado_verificacion': estado,
            'observacion': observacion,
        })

    def delete_titulo(self, persona_id, titulo_id) -> dict:
        return self.delete(f'personas/{persona_id}/titulos/{titulo_id}/')

    def solicitar_eliminacion_titulo(self, titulo_id, motivo=None) -> dict:
        return self.post(f'titulos/{titulo_id}/solicitar-eliminacion/', {'motivo': motivo})

    # =========================================
    # ARCHIVOS
    # =========================================

    def upload_archivo(self, persona_id, filename: str, content: bytes,
                       content_type: str = 'application/octet-stream') -> dict:
        files = {'archivo': (filename, content, content_type)}
        return self.post(f'archivos/persona/{persona_id}/', files=files)

    def get_signed_url(self, archivo_id) -> dict:
        return self.get(f'archivos/{archivo_id}/signed-url/')

    # =========================================
    # LEGAJO
    # =========================================

    def recalcular_legajo(self, persona_id) -> dict:
        return self.post(f'legajo/{persona_id}/recalcular/')

    def get_legajo_estado(self, persona_id) -> dict:
        return self.get(f'legajo/{persona_id}/estado/')

    def set_legajo_estado(self, persona_id, codigo: str) -> dict:
        return self.post(f'legajo/{persona_id}/estado/', {'codigo': codigo})

    def set_plazo_gracia(self, persona_id, fecha_limite: str, motivo: Optional[str] = None) -> dict:
        return self.post(f'legajo/{persona_id}/plazo/', {'fecha_limite': fecha_limite, 'motivo': motivo})
