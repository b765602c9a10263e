import os

from passlib.context import CryptContext

# Factor de costo fijo de bcrypt; la sal se genera en cada llamada a hash()
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

# Funciones de hashing y verificación de contraseñas
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica si una contraseña plana coincide con un hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Genera el hash de una contraseña plana."""
    return pwd_context.hash(password)
