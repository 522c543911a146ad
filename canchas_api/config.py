import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load .env variables
load_dotenv()


# Driver instalado (psycopg2-binary); sin él SQLAlchemy elige según su versión
DB_DRIVER = "postgresql+psycopg2"


def _with_driver(url: str) -> str:
    """Agrega el driver a URLs postgres:// o postgresql:// sin driver explícito."""
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return f"{DB_DRIVER}://" + url[len(scheme):]
    return url


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return _with_driver(url)

    # Variables separadas (DB_HOST, DB_PORT, ...) si no hay DATABASE_URL
    if os.getenv("DB_HOST"):
        return URL.create(
            DB_DRIVER,
            username=os.getenv("DB_USER"),
            password=os.getenv("DB_PASSWORD"),
            host=os.getenv("DB_HOST"),
            port=int(os.getenv("DB_PORT", "5432")),
            database=os.getenv("DB_NAME"),
        ).render_as_string(hide_password=False)

    return f"{DB_DRIVER}://postgres:password@localhost:5432/canchas"


def _split_list(value: str):
    return [item.strip() for item in value.split(",") if item.strip()]


SQLALCHEMY_DATABASE_URL = _database_url()

PORT = int(os.getenv("PORT", "4000"))

# Credenciales del unico administrador
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
ADMIN_TOKEN_TTL_HOURS = int(os.getenv("ADMIN_TOKEN_TTL_HOURS", "8"))

WEBHOOK_URL = os.getenv("WEBHOOK_URL") or os.getenv("N8N_WEBHOOK_URL")
WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "10"))

CANCHAS = _split_list(os.getenv("CANCHAS", "Fútbol 5,Fútbol 7,Pádel 1,Pádel 2"))
PRECIO_INICIAL = int(os.getenv("PRECIO_INICIAL", "0"))

CORS_ORIGINS = _split_list(os.getenv("CORS_ORIGINS", "*"))

# Limite del listado de reservas del panel de admin
RESERVAS_LIMIT = 500
