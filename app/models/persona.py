# backEnd/app/models/persona.py

from sqlalchemy import Column, Integer, String
from .base import Base


class Persona(Base):
    """
    Registro base de una persona. Todas las especializaciones (ej. Cliente)
    comparten la tabla 'personas' y se distinguen por la columna 'tipo_persona'.
    """
    __tablename__ = 'personas'

    id = Column(Integer, primary_key=True, index=True)
    tipo_persona = Column(String(31), nullable=False)
    nombre = Column(String(100))
    genero = Column(String(20))
    edad = Column(Integer, nullable=False, default=0)
    # Unicidad también a nivel de BD: la validación previa del servicio no es atómica
    identificacion = Column(String(20), unique=True, index=True)
    direccion = Column(String(255))
    telefono = Column(String(20))

    __mapper_args__ = {
        "polymorphic_on": tipo_persona,
        "polymorphic_identity": "Persona",
    }

    def __repr__(self):
        return f"<Persona(id={self.id}, nombre='{self.nombre}', identificacion='{self.identificacion}')>"
