from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime

from canchas_api.database import Base


class Precio(Base):
    __tablename__ = "precios"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True)
    cancha = Column(String(100), unique=True, nullable=False)
    precio = Column(Integer, nullable=False, default=0)
    actualizado = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
