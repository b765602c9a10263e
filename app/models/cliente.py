# backEnd/app/models/cliente.py
import random

from sqlalchemy import Boolean, Column, String, event
from .persona import Persona

# Espacio de valores del código de cliente: [0, 1_000_000) con formato de 8 dígitos
CLIENTE_ID_RANGO = 1_000_000


def generar_cliente_id() -> str:
    """Genera un código de cliente de 8 dígitos (con ceros a la izquierda)."""
    return "%08d" % random.randrange(CLIENTE_ID_RANGO)


class Cliente(Persona):
    # Sin __tablename__: se guarda en la tabla 'personas' (herencia de tabla única)
    cliente_id = Column(String(8), unique=True, index=True)
    contrasena = Column("contraseña", String(255))
    estado = Column(Boolean)

    __mapper_args__ = {
        "polymorphic_identity": "Cliente",
    }

    def asignar_cliente_id(self) -> str:
        """Asigna el código de cliente solo si todavía no tiene uno."""
        if self.cliente_id is None:
            self.cliente_id = generar_cliente_id()
        return self.cliente_id

    def __repr__(self):
        return f"<Cliente(id={self.id}, cliente_id='{self.cliente_id}', nombre='{self.nombre}')>"


@event.listens_for(Cliente, "before_insert")
def _asignar_cliente_id_antes_de_insertar(mapper, connection, target):
    target.asignar_cliente_id()
