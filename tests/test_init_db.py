"""
Tests de la inicialización del esquema en el arranque
"""
import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

from canchas_api.database import Base
from canchas_api.init_db import init_db

LEGACY_RESERVAS = """
    CREATE TABLE reservas (
      id INTEGER PRIMARY KEY,
      nombre VARCHAR(100) NOT NULL,
      apellido VARCHAR(100) NOT NULL,
      whatsapp VARCHAR(30) NOT NULL,
      deporte VARCHAR(50) NOT NULL,
      cancha VARCHAR(100) NOT NULL,
      fecha VARCHAR(100) NOT NULL,
      horario VARCHAR(10) NOT NULL,
      precio INTEGER NOT NULL,
      fecha_creacion TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""

LEGACY_INSERT = text(
    "INSERT INTO reservas (nombre, apellido, whatsapp, deporte, cancha, fecha, horario, precio) "
    "VALUES ('Juan', 'Pérez', '1', 'Fútbol', 'Fútbol 5', '2025-06-01', :horario, 100)"
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


def _index_names(engine):
    return {i["name"] for i in inspect(engine).get_indexes("reservas")}


def test_init_db_crea_tablas_y_precios(engine):
    init_db(engine, canchas=["Fútbol 5", "Pádel 1"], precio_inicial=5000)

    tables = set(inspect(engine).get_table_names())
    assert {"reservas", "precios"} <= tables
    assert "uq_reservas_turno_activo" in _index_names(engine)

    with engine.connect() as conn:
        rows = conn.execute(text("SELECT cancha, precio FROM precios ORDER BY cancha")).all()
    assert [tuple(r) for r in rows] == [("Fútbol 5", 5000), ("Pádel 1", 5000)]


def test_init_db_es_idempotente(engine):
    init_db(engine, canchas=["Fútbol 5"], precio_inicial=5000)
    with engine.begin() as conn:
        conn.execute(text("UPDATE precios SET precio = 9 WHERE cancha = 'Fútbol 5'"))

    init_db(engine, canchas=["Fútbol 5"], precio_inicial=5000)

    with engine.connect() as conn:
        rows = conn.execute(text("SELECT cancha, precio FROM precios")).all()
    assert [tuple(r) for r in rows] == [("Fútbol 5", 9)]


def test_init_db_agrega_estado_a_tabla_existente(engine):
    """
    Test: Una tabla reservas creada sin la columna estado se migra en el arranque
    """
    with engine.begin() as conn:
        conn.execute(text(LEGACY_RESERVAS))
        conn.execute(LEGACY_INSERT, {"horario": "18:00"})

    init_db(engine, canchas=[])

    columns = {c["name"] for c in inspect(engine).get_columns("reservas")}
    assert "estado" in columns
    assert "uq_reservas_turno_activo" in _index_names(engine)
    with engine.connect() as conn:
        estado = conn.execute(text("SELECT estado FROM reservas")).scalar_one()
    assert estado == "confirmada"


def test_init_db_con_duplicados_previos_no_falla(engine):
    with engine.begin() as conn:
        conn.execute(text(LEGACY_RESERVAS))
        conn.execute(LEGACY_INSERT, {"horario": "18:00"})
        conn.execute(LEGACY_INSERT, {"horario": "18:00"})

    init_db(engine, canchas=[])

    assert "uq_reservas_turno_activo" not in _index_names(engine)
