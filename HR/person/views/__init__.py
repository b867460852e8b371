from .persona_views import persona_list, persona_detail, persona_identificacion
from .documento_views import (
    documento_list,
    documento_delete,
    documento_estado,
    documento_solicitar_eliminacion,
    tipo_documento_list,
)
from .domicilio_views import (
    domicilio_list,
    domicilio_delete,
    domicilio_solicitar_eliminacion,
    persona_barrio_list,
    persona_barrio_delete,
    departamento_list,
    localidad_list,
    localidad_barrio_list,
)
from .titulo_views import (
    titulo_list,
    titulo_estado,
    titulo_delete,
    titulo_solicitar_eliminacion,
    tipo_titulo_list,
)
from .archivo_views import archivo_upload, archivo_signed_url, archivo_descargar
from .catalogo_views import estado_verificacion_list, eliminacion_list
