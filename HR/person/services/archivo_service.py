"""
Uploaded files: storage, orphan cleanup and signed download tokens.
"""
import hashlib
import logging

from django.conf import settings
from django.core import signing
from django.core.exceptions import ValidationError
from django.db import transaction

from core.notifications.services import notify_safely, notify_user
from HR.person.models import Archivo, Persona
from .notificaciones import acting_user_id, notify_reviewers

logger = logging.getLogger(__name__)

SIGNING_SALT = 'archivos.descarga'


class ArchivoService:

    @staticmethod
    @transaction.atomic
    def upload(user, persona_id, uploaded_file) -> Archivo:
        """
        Store an uploaded file for a persona.

        Validates:
        - Persona exists
        - A non-empty file was sent
        - Size does not exceed ARCHIVO_MAX_BYTES
        """
        if not Persona.objects.filter(pk=persona_id).exists():
            raise ValidationError({'persona_id': 'Persona no encontrada'})
        if uploaded_file is None:
            raise ValidationError({'archivo': 'Archivo requerido'})

        size = getattr(uploaded_file, 'size', 0) or 0
        if size <= 0:
            raise ValidationError({'archivo': 'El archivo está vacío'})
        max_bytes = getattr(settings, 'ARCHIVO_MAX_BYTES', 10 * 1024 * 1024)
        if size > max_bytes:
            raise ValidationError({'archivo': f'El archivo supera el máximo de {max_bytes} bytes'})

        digest = hashlib.sha256()
        for chunk in uploaded_file.chunks():
            digest.update(chunk)
        uploaded_file.seek(0)

        archivo = Archivo(
            persona_id=persona_id,
            nombre_original=uploaded_file.name,
            content_type=getattr(uploaded_file, 'content_type', '') or '',
            size_bytes=size,
            sha256_hex=digest.hexdigest(),
            subido_por=user if getattr(user, 'is_authenticated', False) else None,
        )
        archivo.archivo.save(uploaded_file.name, uploaded_file, save=False)
        archivo.save()

        logger.info(f"Archivo {archivo.pk} ({size} bytes) subido para persona {persona_id}")

        persona = Persona.objects.get(pk=persona_id)
        notify_reviewers(persona_id, {
            'tipo': 'DOC_SUBIDO',
            'mensaje': f'{persona.nombre} {persona.apellido} subió "{archivo.nombre_original}"',
            'meta': {'id_archivo': archivo.pk, 'id_persona': persona_id},
        })
        uploader_id = acting_user_id(user)
        if uploader_id:
            notify_safely(notify_user, uploader_id, {
                'tipo': 'ARCHIVO_RECIBIDO',
                'mensaje': f'Recibimos tu archivo "{archivo.nombre_original}". Está en revisión.',
                'link': '/dashboard/legajo',
                'meta': {'id_archivo': archivo.pk},
            })
        return archivo

    @staticmethod
    def delete_if_orphan(archivo_id) -> bool:
        """
        Delete the file when no document or title references it anymore.
        Storage errors are logged; the row is removed regardless.
        """
        if not archivo_id:
            return False
        archivo = Archivo.objects.filter(pk=archivo_id).first()
        if archivo is None or archivo.count_references() > 0:
            return False

        try:
            archivo.archivo.delete(save=False)
        except OSError as e:
            logger.warning(f"No se pudo borrar el archivo fisico {archivo_id}: {e}")
        archivo.delete()
        logger.info(f"Archivo huerfano {archivo_id} eliminado")
        return True

    @staticmethod
    def make_token(archivo: Archivo) -> str:
        return signing.dumps({'a': archivo.pk}, salt=SIGNING_SALT)

    @staticmethod
    def resolve_token(token: str) -> Archivo:
        """Archivo referenced by a download token; ValidationError when expired or forged."""
        ttl = getattr(settings, 'ARCHIVO_SIGNED_URL_TTL', 300)
        try:
            data = signing.loads(token, salt=SIGNING_SALT, max_age=ttl)
        except signing.SignatureExpired:
            raise ValidationError('El enlace expiró')
        except signing.BadSignature:
            raise ValidationError('Enlace inválido')

        archivo = Archivo.objects.filter(pk=data.get('a')).first()
        if archivo is None:
            raise ValidationError('Archivo no encontrado')
        return archivo
