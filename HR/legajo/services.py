"""
Legajo aggregate computation.

Checklist flags:
- okPersona: nombre, apellido, fecha_nacimiento and sexo loaded
- okIdent: DNI and CUIL loaded
- okDocs: a DNI, CUIL and DOM document exist
- okDomicilio: a domicilio and a barrio assignment exist
- okTitulos: at least one title

recalcular derives INCOMPLETO / PENDIENTE / REVISION from the flags.
VALIDADO and BLOQUEADO are only assigned manually.
"""
import logging
from typing import Optional, Tuple

from django.core.exceptions import ValidationError
from django.db import transaction

from HR.person.models import (
    DOCUMENTOS_OBLIGATORIOS,
    Domicilio,
    Persona,
    PersonaBarrio,
    PersonaDocumento,
    PersonaIdentificacion,
    Titulo,
)
from HR.person.services.notificaciones import acting_user_id, notify_owner, notify_reviewers
from .dtos import EstadoManualDTO, PlazoGraciaDTO
from .models import (
    EstadoLegajo,
    EstadoLegajoCodigo,
    LegajoHistorial,
    MOTIVO_MANUAL,
    MOTIVO_RECALCULO,
    PersonaLegajoEstado,
    PlazoGracia,
)

logger = logging.getLogger(__name__)

CHECKLIST_FLAGS = (
    ('okPersona', 'Datos personales'),
    ('okIdent', 'DNI/CUIL'),
    ('okDocs', 'Documentos obligatorios'),
    ('okDomicilio', 'Domicilio y barrio'),
    ('okTitulos', 'Títulos'),
)


def calcular_codigo(checklist: dict) -> str:
    codigo = EstadoLegajoCodigo.INCOMPLETO
    if checklist.get('okPersona') and checklist.get('okIdent'):
        codigo = EstadoLegajoCodigo.PENDIENTE
    if all(checklist.get(flag) is True for flag, _ in CHECKLIST_FLAGS):
        codigo = EstadoLegajoCodigo.REVISION
    return str(codigo)


def porcentaje_completitud(checklist: Optional[dict]) -> int:
    """
    round(100 * true flags / defined flags). Values that are not booleans
    (missing or not yet computed) are left out; no flags gives 0.
    """
    flags = [value for value in (checklist or {}).values() if isinstance(value, bool)]
    if not flags:
        return 0
    return round(100 * sum(flags) / len(flags))


class LegajoService:

    @staticmethod
    def checklist(persona_id) -> dict:
        persona = Persona.objects.filter(pk=persona_id).first()
        if persona is None:
            raise ValidationError({'persona_id': 'Persona no encontrada'})

        identificacion = PersonaIdentificacion.objects.filter(persona_id=persona_id).first()
        tipos_cargados = set(
            PersonaDocumento.objects.filter(
                persona_id=persona_id, tipo_doc__codigo__in=DOCUMENTOS_OBLIGATORIOS
            ).values_list('tipo_doc__codigo', flat=True)
        )

        checklist = {
            'okPersona': persona.has_datos_basicos(),
            'okIdent': bool(identificacion and identificacion.completa),
            'okDocs': tipos_cargados >= set(DOCUMENTOS_OBLIGATORIOS),
            'okDomicilio': (
                Domicilio.objects.filter(persona_id=persona_id).exists()
                and PersonaBarrio.objects.filter(persona_id=persona_id).exists()
            ),
            'okTitulos': Titulo.objects.filter(persona_id=persona_id).exists(),
        }
        checklist['faltan'] = [label for flag, label in CHECKLIST_FLAGS if not checklist[flag]]
        return checklist

    @staticmethod
    @transaction.atomic
    def set_estado(persona_id, codigo, user=None, motivo=None) -> Tuple[PersonaLegajoEstado, Optional[str]]:
        """
        Store codigo as the current state and append it to the history.
        Returns the state row and the previous codigo (None the first time).
        """
        try:
            estado = EstadoLegajo.objects.get(codigo=str(codigo).upper())
        except EstadoLegajo.DoesNotExist:
            raise ValidationError({'codigo': 'Estado de legajo inválido'})

        acting = user if getattr(user, 'is_authenticated', False) else None
        actual = PersonaLegajoEstado.objects.select_for_update().select_related('estado').filter(
            persona_id=persona_id
        ).first()
        anterior = actual.estado.codigo if actual else None

        if actual is None:
            actual = PersonaLegajoEstado(persona_id=persona_id)
        actual.estado = estado
        actual.actualizado_por = acting
        actual.save()

        LegajoHistorial.objects.create(persona_id=persona_id, estado=estado, motivo=motivo, cambiado_por=acting)
        return actual, anterior

    @staticmethod
    @transaction.atomic
    def recalcular(persona_id, user=None) -> dict:
        """
        Recompute the checklist and store the derived codigo.
        The persona is notified only when the codigo changes.
        """
        checklist = LegajoService.checklist(persona_id)
        codigo = calcular_codigo(checklist)
        actual, anterior = LegajoService.set_estado(persona_id, codigo, user, MOTIVO_RECALCULO)

        if anterior != codigo:
            logger.info(f"Legajo de persona {persona_id}: {anterior} -> {codigo}")
            _notify_estado(actual, user)

        return {
            'estado': codigo,
            'anterior': anterior,
            'checklist': checklist,
            'porcentaje': porcentaje_completitud(checklist),
        }

    @staticmethod
    def get_estado(persona_id) -> dict:
        checklist = LegajoService.checklist(persona_id)

        actual = PersonaLegajoEstado.objects.select_related('estado').filter(persona_id=persona_id).first()
        estado = None
        if actual is not None:
            estado = {
                'codigo': actual.estado.codigo,
                'nombre': actual.estado.nombre,
                'actualizado_en': actual.actualizado_en,
            }

        plazo = PlazoGracia.objects.filter(persona_id=persona_id, activo=True).first()
        return {
            'estado': estado,
            'checklist': checklist,
            'plazo': {
                'fecha_limite': plazo.fecha_limite,
                'motivo': plazo.motivo,
                'creado_en': plazo.creado_en,
            } if plazo else None,
            'porcentaje': porcentaje_completitud(checklist),
        }

    @staticmethod
    @transaction.atomic
    def set_estado_manual(user, dto: EstadoManualDTO) -> PersonaLegajoEstado:
        """Reviewer override. Any of the five codigos, from any state."""
        if not Persona.objects.filter(pk=dto.persona_id).exists():
            raise ValidationError({'persona_id': 'Persona no encontrada'})
        if not (dto.codigo or '').strip():
            raise ValidationError({'codigo': 'codigo requerido'})

        actual, anterior = LegajoService.set_estado(dto.persona_id, dto.codigo.strip(), user, MOTIVO_MANUAL)
        logger.info(
            f"Legajo de persona {dto.persona_id}: {anterior} -> {actual.estado.codigo} "
            f"(manual, usuario {acting_user_id(user)})"
        )
        _notify_estado(actual, user)
        return actual

    @staticmethod
    @transaction.atomic
    def set_plazo(user, dto: PlazoGraciaDTO) -> PlazoGracia:
        """Grant a grace deadline, replacing the active one."""
        try:
            persona = Persona.objects.get(pk=dto.persona_id)
        except Persona.DoesNotExist:
            raise ValidationError({'persona_id': 'Persona no encontrada'})
        if not dto.fecha_limite:
            raise ValidationError({'fecha_limite': 'fecha_limite requerida (YYYY-MM-DD)'})

        PlazoGracia.objects.filter(persona=persona, activo=True).update(activo=False)
        plazo = PlazoGracia.objects.create(
            persona=persona,
            fecha_limite=dto.fecha_limite,
            motivo=(dto.motivo or '').strip() or None,
            creado_por=user if getattr(user, 'is_authenticated', False) else None,
        )

        notify_owner(persona, {
            'tipo': 'LEGAJO_PLAZO_GRACIA',
            'mensaje': f'Se asignó un plazo de gracia hasta {plazo.fecha_limite.isoformat()}',
            'meta': {'fecha_limite': plazo.fecha_limite.isoformat(), 'motivo': plazo.motivo},
        })
        return plazo


def _notify_estado(actual: PersonaLegajoEstado, user):
    persona = actual.persona
    codigo = actual.estado.codigo
    validado = codigo == EstadoLegajoCodigo.VALIDADO
    notify_owner(persona, {
        'tipo': 'LEGAJO_ESTADO',
        'mensaje': '¡Listo! Tu legajo está VALIDADO' if validado else f'Tu legajo está {codigo}',
        'meta': {'estado': codigo},
        'nivel': 'success' if validado else 'warning',
    })
    notify_reviewers(persona.pk, {
        'tipo': 'LEGAJO_ESTADO_CAMBIO',
        'mensaje': f'{persona.full_name} || Estado de legajo: {codigo}',
        'meta': {'id_persona': persona.pk, 'estado': codigo, 'actor': acting_user_id(user)},
    })
