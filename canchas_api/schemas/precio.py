from pydantic import BaseModel, Field
from typing import Optional


class PrecioUpdate(BaseModel):
    cancha: Optional[str] = Field(None, max_length=100)
    precio: Optional[int] = None
