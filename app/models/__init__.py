#aqui se el __init__.py para importar las clases y funciones necesarias
from .base import Base
from .persona import Persona # Registro base (tabla única 'personas')
from .cliente import Cliente, generar_cliente_id # Especialización Cliente
