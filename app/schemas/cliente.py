# backEnd/app/schemas/cliente.py
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

EDAD_MAXIMA = 150


# --- Esquema de entrada para crear/actualizar un Cliente ---
# Tipos estrictos: no se aceptan "28" como edad ni "true" como estado.
class ClienteRequest(BaseModel):
    nombre: str = Field(..., max_length=100, strict=True, description="Nombre completo del cliente")
    genero: str = Field(..., max_length=20, strict=True)
    edad: int = Field(..., ge=0, le=EDAD_MAXIMA, strict=True)
    identificacion: str = Field(..., max_length=20, strict=True, description="Identificación única, solo números.")
    direccion: str = Field(..., max_length=255, strict=True)
    telefono: str = Field(..., max_length=20, strict=True, description="Solo números, con '+' opcional al inicio.")
    contrasena: str = Field(..., min_length=6, strict=True, description="Contraseña en texto plano; se almacena solo su hash.")
    estado: bool = Field(..., strict=True)

    @field_validator('nombre', 'genero', 'identificacion', 'direccion', 'telefono', 'contrasena')
    @classmethod
    def validate_string_fields(cls, v):
        if not v.strip():
            raise ValueError("El campo no puede estar vacío.")
        return v

    @field_validator('identificacion')
    @classmethod
    def validate_identificacion(cls, v):
        # [0-9] y no \d ni isdigit(): estos aceptan dígitos Unicode (¹²³, ٣)
        if not re.fullmatch(r'[0-9]+', v):
            raise ValueError("La identificación solo debe contener números.")
        return v

    @field_validator('telefono')
    @classmethod
    def validate_telefono(cls, v):
        # Permite el formato internacional (ej. +591) y números simples.
        if not re.fullmatch(r'\+?[0-9]+', v):
            raise ValueError("El teléfono solo debe contener números y opcionalmente un '+' al inicio.")
        return v


# --- Esquema público de respuesta (forma reducida) ---
class ClienteResponse(BaseModel):
    cliente_id: str = Field(..., alias="clienteId", description="Código de cliente de 8 dígitos")
    nombre: Optional[str] = None
    identificacion: Optional[str] = None
    estado: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
