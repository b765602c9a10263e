# backEnd/app/repositories/cliente_repository.py

import logging
import os
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import RestriccionAlmacenamientoError
from ..models.cliente import Cliente as DBCliente, generar_cliente_id
from ..models.persona import Persona as DBPersona

logger = logging.getLogger(__name__)

# Intentos de generación del código de cliente antes de rendirse
CLIENTE_ID_MAX_INTENTOS = int(os.getenv("CLIENTE_ID_MAX_INTENTOS", 10))


class ClienteRepository:
    """Acceso a los clientes almacenados en la tabla 'personas'."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, cliente_pk: int) -> Optional[DBCliente]:
        return self.db.query(DBCliente).filter(DBCliente.id == cliente_pk).first()

    def find_by_cliente_id(self, cliente_id: str) -> Optional[DBCliente]:
        return self.db.query(DBCliente).filter(DBCliente.cliente_id == cliente_id).first()

    def exists_by_identificacion(self, identificacion: str) -> bool:
        # Se consulta Persona (no Cliente) para cubrir todas las especializaciones
        return self.db.query(
            self.db.query(DBPersona).filter(DBPersona.identificacion == identificacion).exists()
        ).scalar()

    def exists_by_cliente_id(self, cliente_id: str) -> bool:
        return self.db.query(
            self.db.query(DBCliente).filter(DBCliente.cliente_id == cliente_id).exists()
        ).scalar()

    def find_all(self) -> List[DBCliente]:
        return self.db.query(DBCliente).order_by(DBCliente.id).all()

    def save(self, cliente: DBCliente) -> DBCliente:
        """
        Inserta o actualiza el cliente y devuelve la entidad persistida.
        Lanza RestriccionAlmacenamientoError si la BD rechaza los datos.
        """
        if cliente.cliente_id is None:
            cliente.cliente_id = self._generar_cliente_id_unico()

        try:
            self.db.add(cliente)
            self.db.commit()
            self.db.refresh(cliente)
            return cliente
        except IntegrityError as e:
            self.db.rollback()
            raise RestriccionAlmacenamientoError(f"Restricción de la base de datos violada: {e.orig}") from e

    def delete(self, cliente: DBCliente) -> None:
        self.db.delete(cliente)
        self.db.commit()

    def _generar_cliente_id_unico(self) -> str:
        for intento in range(1, CLIENTE_ID_MAX_INTENTOS + 1):
            candidato = generar_cliente_id()
            if not self.exists_by_cliente_id(candidato):
                return candidato
            logger.warning(f"Código de cliente {candidato} ya en uso (intento {intento}/{CLIENTE_ID_MAX_INTENTOS})")
        raise RestriccionAlmacenamientoError(
            f"No se pudo generar un código de cliente único tras {CLIENTE_ID_MAX_INTENTOS} intentos."
        )
