"""
Response envelope for the RRHH API.

Every JSON response leaving the API has the shape:
{
    "status": "success" | "error",
    "message": "human readable message or empty",
    "data": {...} | [] | null
}

Error responses additionally carry "details": a flat list of itemised
messages ("campo: mensaje") so clients can show one line per problem.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer


def custom_exception_handler(exc, context):
    """
    Format every exception DRF knows about into the error envelope.

    Django's own ValidationError (raised by services) is translated into a
    400 so that a view that forgets to catch it still answers correctly.
    """
    if isinstance(exc, DjangoValidationError):
        errors = exc.message_dict if hasattr(exc, 'message_dict') else exc.messages
        return Response(
            format_error_response(errors, http_status.HTTP_400_BAD_REQUEST),
            status=http_status.HTTP_400_BAD_REQUEST
        )

    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def flatten_errors(errors, prefix=''):
    """
    Turn DRF/Django error structures into a flat list of "field: message".

    {"calle": ["Requerido"], "barrio": {"id": ["Invalido"]}}
        -> ["calle: Requerido", "barrio.id: Invalido"]
    """
    items = []
    if isinstance(errors, dict):
        for field, value in errors.items():
            if field in ('detail', 'non_field_errors', '__all__'):
                key = prefix
            else:
                key = f"{prefix}.{field}" if prefix else str(field)
            items.extend(flatten_errors(value, key))
    elif isinstance(errors, (list, tuple)):
        for value in errors:
            items.extend(flatten_errors(value, prefix))
    elif errors is not None:
        items.append(f"{prefix}: {errors}" if prefix else str(errors))
    return items


def format_error_response(errors, status_code):
    """
    Build the error envelope.

    - {"detail": "message"}   -> message "message"
    - {"error": "message"}    -> message "message"
    - {"field": ["e1", "e2"]} -> message "field: e1; field: e2"
    - ["e1", "e2"]            -> message "e1; e2"
    """
    if isinstance(errors, dict) and isinstance(errors.get('detail'), str) and len(errors) == 1:
        message = errors['detail']
        details = [message]
    elif isinstance(errors, dict) and 'error' in errors:
        message = str(errors['error'])
        details = flatten_errors({k: v for k, v in errors.items() if k != 'error'}) or [message]
    else:
        details = flatten_errors(errors)
        message = "; ".join(details)

    return {
        "status": "error",
        "message": message,
        "data": None,
        "details": details,
    }


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that wraps responses into the standard envelope.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 keeps an empty body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data, response.status_code)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        if isinstance(data, dict):
            return 'status' in data and 'message' in data and 'data' in data
        return False

    def format_success_response(self, data, status_code):
        if isinstance(data, dict) and 'detail' in data and len(data) == 1:
            message = str(data['detail'])
            response_data = None
        elif data is None or (isinstance(data, dict) and not data):
            message = ""
            response_data = None
        else:
            message = ""
            response_data = data

        return {
            "status": "success",
            "message": message,
            "data": response_data
        }


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build an already-enveloped success response.

        return success_response(
            data=DocumentoSerializer(documento).data,
            message="Documento creado",
            status_code=status.HTTP_201_CREATED
        )
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST, details=None):
    """
    Build an already-enveloped error response.

        return error_response("Documento no encontrado", status_code=status.HTTP_404_NOT_FOUND)
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data,
        "details": details if details is not None else [message],
    }, status=status_code)


def validation_error_response(exc):
    """400 response for a Django ValidationError raised by a service."""
    errors = exc.message_dict if hasattr(exc, 'message_dict') else exc.messages
    return Response(
        format_error_response(errors, http_status.HTTP_400_BAD_REQUEST),
        status=http_status.HTTP_400_BAD_REQUEST
    )
