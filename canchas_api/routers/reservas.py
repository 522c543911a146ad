import logging
from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from canchas_api import config
from canchas_api.core.errors import BadRequest, InternalError
from canchas_api.crud import reserva as crud
from canchas_api.database import get_db
from canchas_api.schemas.admin import Ok
from canchas_api.schemas.reserva import (
    Disponibilidad,
    ReservaCreate,
    ReservaCreated,
    ReservaResponse,
    ReservaWebhook,
)
from canchas_api.services.auth import require_admin
from canchas_api.services.webhook import notify_reserva

logger = logging.getLogger(__name__)

router = APIRouter()

CAMPOS_OBLIGATORIOS = ("nombre", "apellido", "whatsapp", "cancha", "fecha", "horario")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@router.get("/disponibilidad", response_model=Disponibilidad)
def read_disponibilidad(
    cancha: Optional[str] = None,
    fecha: Optional[str] = None,
    db: Session = Depends(get_db),
):
    if _blank(cancha) or _blank(fecha):
        raise BadRequest("Faltan parámetros")

    try:
        ocupados = crud.get_horarios_ocupados(db, cancha=cancha, fecha=fecha)
    except SQLAlchemyError as exc:
        logger.exception("Error al consultar disponibilidad")
        raise InternalError("Error al consultar disponibilidad") from exc
    return {"ocupados": ocupados}


@router.post("/reservar", response_model=ReservaCreated)
def create_reserva(
    reserva: ReservaCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    if any(_blank(getattr(reserva, campo)) for campo in CAMPOS_OBLIGATORIOS):
        raise BadRequest("Faltan datos")

    try:
        db_reserva = crud.create_reserva(db=db, reserva=reserva)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error al guardar la reserva")
        raise InternalError("Error al guardar la reserva") from exc

    logger.info(
        "Reserva %s creada: %s %s %s",
        db_reserva.id,
        db_reserva.cancha,
        db_reserva.fecha,
        db_reserva.horario,
    )

    # El webhook corre después de responder; su resultado no afecta la reserva
    if config.WEBHOOK_URL:
        payload = ReservaWebhook.model_validate(db_reserva).model_dump()
        background_tasks.add_task(notify_reserva, payload)

    return {"ok": True, "id": db_reserva.id}


@router.post("/cancelar/{reserva_id}", response_model=Ok)
def cancel_reserva(
    reserva_id: int,
    db: Session = Depends(get_db),
    _: str = Depends(require_admin),
):
    try:
        updated = crud.cancel_reserva(db, reserva_id=reserva_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error al cancelar la reserva %s", reserva_id)
        raise InternalError("Error al cancelar la reserva") from exc

    if not updated:
        logger.info("Cancelación de reserva inexistente %s", reserva_id)
    return {"ok": True}


@router.get("/reservas", response_model=List[ReservaResponse])
def read_reservas(
    db: Session = Depends(get_db),
    _: str = Depends(require_admin),
):
    try:
        return crud.get_reservas(db, limit=config.RESERVAS_LIMIT)
    except SQLAlchemyError as exc:
        logger.exception("Error al obtener reservas")
        raise InternalError("Error al obtener reservas") from exc
