"""
Configuración compartida para tests pytest
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from canchas_api import config
from canchas_api.database import Base, get_db
from canchas_api.init_db import init_db
from canchas_api.main import app
from canchas_api.services.auth import sessions

# Importar todos los modelos para que SQLAlchemy registre las tablas
from canchas_api.models.reserva import Reserva
from canchas_api.models.precio import Precio


ADMIN_EMAIL = "admin@canchas.test"
ADMIN_PASSWORD = "clave-secreta"
CANCHAS = ["Fútbol 5", "Pádel 1", "Pádel 2"]

# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Crear base de datos de test y limpiarla después"""
    init_db(engine, canchas=CANCHAS, precio_inicial=10000)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def admin_settings(monkeypatch):
    """Credenciales de admin fijas y sin webhook"""
    monkeypatch.setattr(config, "ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setattr(config, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(config, "WEBHOOK_URL", None)
    sessions.clear()
    yield
    sessions.clear()


@pytest.fixture
def client(db):
    """TestClient con get_db apuntando a la base en memoria"""
    def _get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def reserva_data():
    return {
        "nombre": "Juan",
        "apellido": "Pérez",
        "whatsapp": "+5491155550000",
        "deporte": "Pádel",
        "cancha": "Pádel 1",
        "fecha": "2025-06-01",
        "horario": "18:00",
        "precio": 12000,
    }
