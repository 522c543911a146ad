from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


class ReservaCreate(BaseModel):
    # Todos opcionales: la presencia se valida en el router para responder 400
    # Largos máximos iguales a las columnas de reservas
    nombre: Optional[str] = Field(None, max_length=100)
    apellido: Optional[str] = Field(None, max_length=100)
    whatsapp: Optional[str] = Field(None, max_length=30)
    deporte: Optional[str] = Field(None, max_length=50)
    cancha: Optional[str] = Field(None, max_length=100)
    fecha: Optional[str] = Field(None, max_length=100)
    horario: Optional[str] = Field(None, max_length=10)
    precio: Optional[int] = None


class ReservaWebhook(BaseModel):
    id: int
    nombre: str
    apellido: str
    whatsapp: str
    deporte: Optional[str] = None
    cancha: str
    fecha: str
    horario: str
    precio: Optional[int] = None

    class Config:
        from_attributes = True


class ReservaResponse(ReservaWebhook):
    estado: str
    fecha_creacion: datetime


class ReservaCreated(BaseModel):
    ok: bool = True
    id: int


class Disponibilidad(BaseModel):
    ocupados: List[str]
