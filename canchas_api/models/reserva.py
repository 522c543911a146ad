from sqlalchemy import Column, Integer, String, DateTime, Index, text
from datetime import datetime
import enum

from canchas_api.database import Base


class EstadoReserva(str, enum.Enum):
    CONFIRMADA = "confirmada"
    CANCELADA = "cancelada"


# Solo puede existir una reserva no cancelada por cancha, fecha y horario
_TURNO_ACTIVO = text("estado <> 'cancelada'")


class Reserva(Base):
    __tablename__ = "reservas"
    __table_args__ = (
        Index(
            "uq_reservas_turno_activo",
            "cancha",
            "fecha",
            "horario",
            unique=True,
            postgresql_where=_TURNO_ACTIVO,
            sqlite_where=_TURNO_ACTIVO,
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    whatsapp = Column(String(30), nullable=False)
    deporte = Column(String(50), nullable=True)
    cancha = Column(String(100), nullable=False)
    fecha = Column(String(100), nullable=False)
    horario = Column(String(10), nullable=False)
    precio = Column(Integer, nullable=True)
    estado = Column(
        String(20),
        nullable=False,
        default=EstadoReserva.CONFIRMADA.value,
        server_default=EstadoReserva.CONFIRMADA.value,
    )
    fecha_creacion = Column(DateTime, default=datetime.utcnow)
