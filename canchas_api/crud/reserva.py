from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List

from canchas_api.core.errors import Conflict
from canchas_api.models.reserva import Reserva, EstadoReserva
from canchas_api.schemas.reserva import ReservaCreate


def _activas(db: Session, cancha: str, fecha: str):
    return db.query(Reserva).filter(
        Reserva.cancha == cancha,
        Reserva.fecha == fecha,
        Reserva.estado != EstadoReserva.CANCELADA.value,
    )


def get_horarios_ocupados(db: Session, cancha: str, fecha: str) -> List[str]:
    rows = (
        _activas(db, cancha, fecha)
        .with_entities(Reserva.horario)
        .order_by(Reserva.id)
        .all()
    )
    return [row.horario for row in rows]


def horario_ocupado(db: Session, cancha: str, fecha: str, horario: str) -> bool:
    return (
        _activas(db, cancha, fecha).filter(Reserva.horario == horario).first()
        is not None
    )


def create_reserva(db: Session, reserva: ReservaCreate) -> Reserva:
    """
    Crea la reserva si el turno (cancha, fecha, horario) está libre.

    El chequeo previo evita el INSERT en el caso común; el índice único
    parcial uq_reservas_turno_activo cubre dos pedidos simultáneos que
    pasen el chequeo a la vez. En ambos casos se lanza Conflict.
    """
    if horario_ocupado(db, reserva.cancha, reserva.fecha, reserva.horario):
        raise Conflict()

    db_reserva = Reserva(
        nombre=reserva.nombre,
        apellido=reserva.apellido,
        whatsapp=reserva.whatsapp,
        deporte=reserva.deporte,
        cancha=reserva.cancha,
        fecha=reserva.fecha,
        horario=reserva.horario,
        precio=reserva.precio,
        estado=EstadoReserva.CONFIRMADA.value,
    )
    db.add(db_reserva)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict() from exc
    db.refresh(db_reserva)
    return db_reserva


def cancel_reserva(db: Session, reserva_id: int) -> int:
    """Marca la reserva como cancelada. Devuelve las filas afectadas (0 si no existe)."""
    updated = (
        db.query(Reserva)
        .filter(Reserva.id == reserva_id)
        .update({Reserva.estado: EstadoReserva.CANCELADA.value}, synchronize_session=False)
    )
    db.commit()
    return updated


def get_reservas(db: Session, limit: int = 500) -> List[Reserva]:
    return (
        db.query(Reserva)
        .order_by(Reserva.fecha_creacion.desc(), Reserva.id.desc())
        .limit(limit)
        .all()
    )
