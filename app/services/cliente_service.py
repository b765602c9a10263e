# backEnd/app/services/cliente_service.py

import logging
from typing import List, Optional

from ..exceptions import (
    ArgumentoInvalidoError,
    IdentificacionDuplicadaError,
    RecursoNoEncontradoError,
    RestriccionAlmacenamientoError,
)
from ..models.cliente import Cliente as DBCliente
from ..repositories.cliente_repository import ClienteRepository
from ..schemas.cliente import ClienteRequest, ClienteResponse
from ..security import get_password_hash

MENSAJE_IDENTIFICACION_DUPLICADA = "La identificación ya está en uso."


class ClienteService:
    """
    Servicio para la gestión de clientes.

    Cada operación valida, transforma y delega en el repositorio; no guarda
    estado entre llamadas. El logger se inyecta para no depender de un
    logger global (por defecto, el del módulo).
    """

    def __init__(self, repositorio: ClienteRepository, logger: Optional[logging.Logger] = None):
        self.repositorio = repositorio
        self.logger = logger or logging.getLogger(__name__)

    def crear_cliente(self, cliente_request: ClienteRequest) -> ClienteResponse:
        """
        Crea un nuevo cliente y lo guarda en la base de datos.

        Lanza IdentificacionDuplicadaError si la identificación ya existe y
        ArgumentoInvalidoError si falta el nombre/contraseña o si la base de
        datos rechaza los datos.
        """
        self.logger.info(f"Intentando crear un nuevo cliente con identificación: {cliente_request.identificacion}")

        if self.repositorio.exists_by_identificacion(cliente_request.identificacion):
            raise IdentificacionDuplicadaError(MENSAJE_IDENTIFICACION_DUPLICADA)
        if not cliente_request.nombre:
            raise ArgumentoInvalidoError("El nombre del cliente es obligatorio.")

        cliente = DBCliente()
        self._asignar_datos(cliente, cliente_request)

        try:
            cliente = self.repositorio.save(cliente)
            self.logger.info(f"Cliente creado exitosamente con ID: {cliente.cliente_id}")
        except RestriccionAlmacenamientoError as e:
            self.logger.error(f"Error al guardar el cliente: {e.mensaje}")
            raise ArgumentoInvalidoError("Error al guardar el cliente. Verifique los datos ingresados.") from e

        return ClienteResponse.model_validate(cliente)

    def obtener_cliente_por_id(self, cliente_pk: int) -> ClienteResponse:
        return ClienteResponse.model_validate(self._obtener_o_fallar(cliente_pk))

    def obtener_cliente_por_codigo(self, cliente_id: str) -> ClienteResponse:
        cliente = self.repositorio.find_by_cliente_id(cliente_id)
        if cliente is None:
            raise RecursoNoEncontradoError(f"Cliente no encontrado con el código: {cliente_id}")
        return ClienteResponse.model_validate(cliente)

    def editar_cliente(self, cliente_pk: int, cliente_request: ClienteRequest) -> ClienteResponse:
        """
        Reemplaza los datos de un cliente existente. El código de cliente no
        cambia; la contraseña se vuelve a hashear en cada edición.
        """
        self.logger.info(f"Editando cliente con ID: {cliente_pk}")
        cliente = self._obtener_o_fallar(cliente_pk)

        nueva_identificacion = cliente_request.identificacion
        if (nueva_identificacion is not None
                and nueva_identificacion != cliente.identificacion
                and self.repositorio.exists_by_identificacion(nueva_identificacion)):
            raise IdentificacionDuplicadaError(MENSAJE_IDENTIFICACION_DUPLICADA)

        self._asignar_datos(cliente, cliente_request)

        try:
            cliente = self.repositorio.save(cliente)
        except RestriccionAlmacenamientoError as e:
            self.logger.error(f"Error al actualizar el cliente {cliente_pk}: {e.mensaje}")
            raise ArgumentoInvalidoError("Error al actualizar el cliente. Verifique los datos ingresados.") from e

        return ClienteResponse.model_validate(cliente)

    def eliminar_cliente(self, cliente_pk: int) -> None:
        cliente = self._obtener_o_fallar(cliente_pk)
        self.repositorio.delete(cliente)
        self.logger.info(f"Cliente eliminado con ID: {cliente_pk}")

    def listar_clientes(self) -> List[ClienteResponse]:
        return [ClienteResponse.model_validate(cliente) for cliente in self.repositorio.find_all()]

    def _obtener_o_fallar(self, cliente_pk: int) -> DBCliente:
        cliente = self.repositorio.find_by_id(cliente_pk)
        if cliente is None:
            raise RecursoNoEncontradoError(f"Cliente no encontrado con el ID: {cliente_pk}")
        return cliente

    @staticmethod
    def _asignar_datos(cliente: DBCliente, cliente_request: ClienteRequest) -> None:
        if not cliente_request.contrasena:
            raise ArgumentoInvalidoError("La contraseña del cliente es obligatoria.")

        cliente.nombre = cliente_request.nombre
        cliente.genero = cliente_request.genero
        cliente.edad = cliente_request.edad
        cliente.identificacion = cliente_request.identificacion
        cliente.direccion = cliente_request.direccion
        cliente.telefono = cliente_request.telefono
        cliente.estado = cliente_request.estado
        # Sal nueva en cada llamada: la contraseña se rota aunque no haya cambiado
        cliente.contrasena = get_password_hash(cliente_request.contrasena)
