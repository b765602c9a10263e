from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
import logging
import os

# --- Carga de Variables de Entorno ---
load_dotenv()

from app.models.base import Base
from app.database import engine
from app.exceptions import IdentificacionDuplicadaError, RecursoNoEncontradoError, ValidacionError
from app.routes import cliente
from app.schemas.validacion import mensaje_de_error

# --- Configuración de Logging ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ORIGINS = [origen.strip() for origen in os.getenv("CORS_ORIGINS", "*").split(",") if origen.strip()]

# --- Creación de la Aplicación FastAPI ---
app = FastAPI(
    title="API de Gestión de Clientes",
    description="API para crear, consultar, actualizar y eliminar clientes (personas con credenciales y estado).",
    version="1.0.0"
)

# --- Middlewares ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Creación de Tablas en la Base de Datos (para desarrollo) ---
Base.metadata.create_all(bind=engine)

# --- Manejadores Globales de Excepciones ---
@app.exception_handler(ValidacionError)
async def validacion_exception_handler(request: Request, exc: ValidacionError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errores)

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # Mapa campo -> mensaje, igual que ValidacionError
    errores = {}
    for error in exc.errors():
        campo = str(error["loc"][-1]) if error.get("loc") else "body"
        errores.setdefault(campo, mensaje_de_error(error))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errores)

@app.exception_handler(IdentificacionDuplicadaError)
async def identificacion_duplicada_exception_handler(request: Request, exc: IdentificacionDuplicadaError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.mensaje})

@app.exception_handler(RecursoNoEncontradoError)
async def recurso_no_encontrado_exception_handler(request: Request, exc: RecursoNoEncontradoError):
    logger.info(f"{request.method} {request.url.path}: {exc.mensaje}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.mensaje})

# --- Inclusión de Routers de la API ---
app.include_router(cliente.router)
