# backEnd/app/schemas/validacion.py
from typing import Any, Dict

from pydantic import ValidationError

from .cliente import ClienteRequest

# Mensajes por tipo de error de pydantic; los de los validadores propios
# (tipo 'value_error') se usan tal cual.
MENSAJES_POR_TIPO = {
    "missing": "El campo es obligatorio.",
    "string_type": "El campo debe ser un texto.",
    "string_too_short": "Debe tener al menos {min_length} caracteres.",
    "string_too_long": "No puede superar los {max_length} caracteres.",
    "int_type": "Debe ser un número entero.",
    "int_parsing": "Debe ser un número entero.",
    "greater_than_equal": "Debe ser mayor o igual a {ge}.",
    "less_than_equal": "Debe ser menor o igual a {le}.",
    "bool_type": "Debe ser verdadero o falso.",
    "model_type": "El cuerpo de la petición debe ser un objeto JSON.",
}


def mensaje_de_error(error: Dict[str, Any]) -> str:
    """Traduce un error de pydantic (ValidationError.errors()) a un mensaje legible."""
    ctx = error.get("ctx") or {}
    if error["type"] == "value_error" and "error" in ctx:
        return str(ctx["error"])
    plantilla = MENSAJES_POR_TIPO.get(error["type"])
    if plantilla is None:
        return error.get("msg", "Valor inválido.")
    return plantilla.format(**ctx)


def errores_por_campo(exc: ValidationError) -> Dict[str, str]:
    errores: Dict[str, str] = {}
    for error in exc.errors():
        campo = str(error["loc"][0]) if error.get("loc") else "body"
        # Un mensaje por campo: el primero que reporta pydantic
        errores.setdefault(campo, mensaje_de_error(error))
    return errores


def validar_cliente_request(payload: Any) -> Dict[str, str]:
    """
    Valida el cuerpo de una petición de creación/actualización de cliente
    contra ClienteRequest.

    Devuelve un diccionario campo -> mensaje de error. Un diccionario vacío
    significa que el cuerpo es válido y puede construirse un ClienteRequest.
    """
    try:
        ClienteRequest.model_validate(payload)
    except ValidationError as e:
        return errores_por_campo(e)
    return {}
