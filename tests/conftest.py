"""
Configuración global para todas las pruebas pytest
"""
import os

# Antes de importar la app: BD en memoria y costo de bcrypt mínimo para acelerar las pruebas
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models.base import Base
from app.models.cliente import Cliente as DBCliente
from app.repositories.cliente_repository import ClienteRepository
from app.schemas.cliente import ClienteRequest
from app.security import get_password_hash
from app.services.cliente_service import ClienteService

# Base de datos SQLite en memoria, una sola conexión compartida entre hilos
SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """
    Crea el esquema, entrega una sesión y elimina todas las tablas al final.
    Cada prueba empieza con la base de datos vacía.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    """
    Cliente HTTP de pruebas con la base de datos de pruebas.
    """
    def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    with TestClient(app) as client:
        yield client

    # Limpiar overrides después del test
    app.dependency_overrides.clear()

@pytest.fixture
def repositorio(db_session):
    return ClienteRepository(db_session)

@pytest.fixture
def cliente_service(repositorio):
    return ClienteService(repositorio)

@pytest.fixture
def sample_cliente_data():
    """
    Datos de ejemplo para crear clientes en tests (cuerpo JSON de la API).
    """
    return {
        "nombre": "Carlos Fernández",
        "genero": "Masculino",
        "edad": 28,
        "identificacion": "10948075",
        "direccion": "Avenida Siempre Viva 742",
        "telefono": "5556789",
        "contrasena": "contrasena123",
        "estado": True
    }

@pytest.fixture
def sample_cliente_request(sample_cliente_data):
    return ClienteRequest(**sample_cliente_data)

@pytest.fixture
def create_test_cliente(db_session):
    """
    Factory function para crear clientes de prueba directamente en la BD.
    """
    def _create_cliente(nombre="Ana Torres", identificacion="20000001", cliente_id=None, contrasena="secreto123", estado=True):
        cliente = DBCliente(
            nombre=nombre,
            genero="Femenino",
            edad=35,
            identificacion=identificacion,
            direccion="Calle Falsa 123",
            telefono="5551234",
            contrasena=get_password_hash(contrasena),
            estado=estado
        )
        if cliente_id:
            cliente.cliente_id = cliente_id
        db_session.add(cliente)
        db_session.commit()
        db_session.refresh(cliente)
        return cliente

    return _create_cliente
