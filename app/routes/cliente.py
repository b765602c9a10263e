# backEnd/app/routes/cliente.py

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import (
    ArgumentoInvalidoError,
    IdentificacionDuplicadaError,
    RecursoNoEncontradoError,
    ValidacionError,
)
from ..repositories.cliente_repository import ClienteRepository
from ..schemas.cliente import ClienteRequest, ClienteResponse
from ..schemas.validacion import validar_cliente_request
from ..services.cliente_service import ClienteService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clientes",
    tags=["clientes"]
)

# Mayor entero que admite una columna INTEGER de 64 bits
ID_MAXIMO = 2**63 - 1

# --- Dependencias Reutilizables ---
def get_cliente_service(db: Session = Depends(get_db)) -> ClienteService:
    """Construye el servicio de clientes sobre la sesión de la petición."""
    return ClienteService(ClienteRepository(db))

def parse_cliente_request(payload: Any = Body(..., description="Datos del cliente")) -> ClienteRequest:
    """
    Valida el cuerpo de la petición y construye el ClienteRequest.
    Lanza ValidacionError (400, mapa campo -> mensaje) si hay errores.
    """
    errores = validar_cliente_request(payload)
    if errores:
        raise ValidacionError(errores)
    return ClienteRequest.model_validate(payload)

# --- Rutas de API para Clientes ---

@router.get("", response_model=List[ClienteResponse])
def get_all_clientes(service: ClienteService = Depends(get_cliente_service)):
    """Obtiene una lista de todos los clientes."""
    return service.listar_clientes()

@router.get("/codigo/{cliente_id}", response_model=ClienteResponse)
def get_cliente_by_codigo(
    cliente_id: str = Path(..., title="Código de cliente de 8 dígitos"),
    service: ClienteService = Depends(get_cliente_service)
):
    # RecursoNoEncontradoError lo traduce a 404 el manejador global (app.main)
    return service.obtener_cliente_por_codigo(cliente_id)

@router.get("/{cliente_pk}", response_model=ClienteResponse)
def get_cliente_by_id(
    cliente_pk: int = Path(..., ge=1, le=ID_MAXIMO, title="El ID del cliente"),
    service: ClienteService = Depends(get_cliente_service)
):
    """Obtiene los detalles de un cliente específico por su ID."""
    return service.obtener_cliente_por_id(cliente_pk)

@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def create_cliente(
    cliente_request: ClienteRequest = Depends(parse_cliente_request),
    service: ClienteService = Depends(get_cliente_service)
):
    """
    Crea un nuevo cliente. Responde 201 con el código asignado, o 400 si la
    identificación ya existe o los datos no son válidos.
    """
    try:
        cliente = service.crear_cliente(cliente_request)
    except (IdentificacionDuplicadaError, ArgumentoInvalidoError) as e:
        return PlainTextResponse(e.mensaje, status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(
        f"Cliente creado exitosamente con ID: {cliente.cliente_id}",
        status_code=status.HTTP_201_CREATED
    )

@router.put("/{cliente_pk}", response_class=PlainTextResponse)
def update_cliente(
    cliente_pk: int = Path(..., ge=1, le=ID_MAXIMO, title="El ID del cliente a actualizar"),
    cliente_request: ClienteRequest = Depends(parse_cliente_request),
    service: ClienteService = Depends(get_cliente_service)
):
    """Actualiza un cliente existente con los nuevos datos proporcionados."""
    try:
        cliente = service.editar_cliente(cliente_pk, cliente_request)
    except (IdentificacionDuplicadaError, ArgumentoInvalidoError) as e:
        return PlainTextResponse(e.mensaje, status_code=status.HTTP_400_BAD_REQUEST)
    except RecursoNoEncontradoError as e:
        return PlainTextResponse(e.mensaje, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(f"Cliente actualizado exitosamente con ID: {cliente.cliente_id}")

@router.delete("/{cliente_pk}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cliente(
    cliente_pk: int = Path(..., ge=1, le=ID_MAXIMO, title="El ID del cliente a eliminar"),
    service: ClienteService = Depends(get_cliente_service)
):
    """
    Elimina un cliente por su ID. Una respuesta 204 no lleva cuerpo, así que el
    mensaje de confirmación solo queda en el log.
    """
    try:
        service.eliminar_cliente(cliente_pk)
    except RecursoNoEncontradoError as e:
        return PlainTextResponse(e.mensaje, status_code=status.HTTP_404_NOT_FOUND)
    logger.info("Cliente eliminado exitosamente.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
