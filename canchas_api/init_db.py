import logging
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from canchas_api import config
from canchas_api.crud.precio import seed_precios
from canchas_api.database import Base
from canchas_api.models import Reserva

logger = logging.getLogger(__name__)


def _add_estado_column(engine: Engine) -> bool:
    """Agrega reservas.estado a tablas creadas antes de que existiera la columna."""
    columns = {c["name"] for c in inspect(engine).get_columns("reservas")}
    if "estado" in columns:
        return False

    with engine.begin() as conn:
        conn.execute(
            text(
                "ALTER TABLE reservas "
                "ADD COLUMN estado VARCHAR(20) NOT NULL DEFAULT 'confirmada'"
            )
        )
    logger.info("Columna reservas.estado agregada")
    return True


def _create_turno_activo_index(engine: Engine) -> None:
    (index,) = [i for i in Reserva.__table__.indexes if i.name == "uq_reservas_turno_activo"]
    try:
        index.create(bind=engine, checkfirst=True)
    except SQLAlchemyError:
        # Reservas duplicadas previas impiden crear el índice; el chequeo
        # previo al INSERT sigue funcionando sin él.
        logger.exception(
            "No se pudo crear el índice %s (¿reservas duplicadas?)", index.name
        )


def init_db(engine: Engine, canchas=None, precio_inicial=None) -> None:
    """
    Deja el esquema listo. Idempotente: se ejecuta en cada arranque.
    """
    Base.metadata.create_all(bind=engine)
    _add_estado_column(engine)
    _create_turno_activo_index(engine)

    canchas = config.CANCHAS if canchas is None else canchas
    precio_inicial = config.PRECIO_INICIAL if precio_inicial is None else precio_inicial

    db = sessionmaker(bind=engine)()
    try:
        nuevas = seed_precios(db, canchas, precio=precio_inicial)
        if nuevas:
            logger.info("Precios iniciales creados para: %s", ", ".join(nuevas))
    finally:
        db.close()

    logger.info("Base de datos lista")
