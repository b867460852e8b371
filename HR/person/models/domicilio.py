from django.core.validators import MinValueValidator
from django.db import models

from core.base.models import AuditMixin


class DomDepartamento(models.Model):
    departamento = models.CharField(max_length=100)

    class Meta:
        db_table = 'dom_departamento'
        verbose_name = 'Departamento'
        verbose_name_plural = 'Departamentos'
        ordering = ['departamento']

    def __str__(self):
        return self.departamento


class DomLocalidad(models.Model):
    departamento = models.ForeignKey(
        DomDepartamento,
        on_delete=models.PROTECT,
        related_name='localidades'
    )
    localidad = models.CharField(max_length=100)
    codigo_postal = models.CharField(max_length=10, blank=True, default='')

    class Meta:
        db_table = 'dom_localidad'
        verbose_name = 'Localidad'
        verbose_name_plural = 'Localidades'
        ordering = ['localidad']

    def __str__(self):
        return self.localidad


class DomBarrio(models.Model):
    """
    Neighbourhood with optional block / house / unit / floor detail.
    Created on demand while registering a domicilio.
    """
    localidad = models.ForeignKey(
        DomLocalidad,
        on_delete=models.PROTECT,
        related_name='barrios'
    )
    barrio = models.CharField(max_length=120)
    manzana = models.CharField(max_length=20, blank=True, default='')
    casa = models.CharField(max_length=20, blank=True, default='')
    departamento = models.CharField(max_length=20, blank=True, default='')
    piso = models.CharField(max_length=20, blank=True, default='')

    class Meta:
        db_table = 'dom_barrio'
        verbose_name = 'Barrio'
        verbose_name_plural = 'Barrios'
        ordering = ['barrio']

    def __str__(self):
        return self.barrio


class PersonaBarrio(models.Model):
    """Barrio assigned to a persona."""
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='barrios_asignados'
    )
    barrio = models.ForeignKey(
        DomBarrio,
        on_delete=models.CASCADE,
        related_name='asignaciones'
    )
    asignado_en = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'persona_barrio'
        verbose_name = 'Barrio de persona'
        verbose_name_plural = 'Barrios de persona'
        unique_together = ('persona', 'barrio')
        ordering = ['-asignado_en']


class Domicilio(AuditMixin, models.Model):
    persona = models.ForeignKey(
        'person.Persona',
        on_delete=models.CASCADE,
        related_name='domicilios'
    )
    barrio = models.ForeignKey(
        DomBarrio,
        on_delete=models.PROTECT,
        related_name='domicilios'
    )
    calle = models.CharField(max_length=120)
    altura = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = 'persona_domicilio'
        verbose_name = 'Domicilio'
        verbose_name_plural = 'Domicilios'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.calle} {self.altura}"
