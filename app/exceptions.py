# backEnd/app/exceptions.py
"""
Excepciones de dominio del módulo de clientes.

Las lanza la capa de servicio (o el repositorio, en el caso de las
restricciones de almacenamiento). La capa HTTP las captura y las traduce a
respuestas con el código de estado correspondiente.
"""
from typing import Dict


class ClienteError(Exception):
    """Base de todas las excepciones del módulo de clientes."""

    def __init__(self, mensaje: str):
        super().__init__(mensaje)
        self.mensaje = mensaje


class IdentificacionDuplicadaError(ClienteError):
    """Ya existe una persona registrada con la misma identificación."""


class RecursoNoEncontradoError(ClienteError):
    """No existe un registro para el ID solicitado."""


class ArgumentoInvalidoError(ClienteError, ValueError):
    """Falta un campo obligatorio o el almacenamiento rechazó los datos."""


class RestriccionAlmacenamientoError(ClienteError):
    """La base de datos rechazó la operación (unicidad, formato, nulos...)."""


class ValidacionError(ClienteError):
    """Errores de validación por campo sobre el cuerpo de la petición."""

    def __init__(self, errores: Dict[str, str]):
        super().__init__("Datos de entrada inválidos.")
        self.errores = errores
