from sqlalchemy.orm import Session
from datetime import datetime
from typing import Dict, Iterable, List

from canchas_api.models.precio import Precio


def get_precios(db: Session) -> Dict[str, int]:
    return {p.cancha: p.precio for p in db.query(Precio).order_by(Precio.cancha).all()}


def update_precio(db: Session, cancha: str, precio: int) -> int:
    """Actualiza el precio de una cancha. Devuelve las filas afectadas."""
    updated = (
        db.query(Precio)
        .filter(Precio.cancha == cancha)
        .update(
            {Precio.precio: precio, Precio.actualizado: datetime.utcnow()},
            synchronize_session=False,
        )
    )
    db.commit()
    return updated


def seed_precios(db: Session, canchas: Iterable[str], precio: int = 0) -> List[str]:
    """Crea las filas de precios que falten. Nunca pisa un precio existente."""
    existentes = {row.cancha for row in db.query(Precio.cancha).all()}
    nuevas = list(dict.fromkeys(c for c in canchas if c not in existentes))
    for cancha in nuevas:
        db.add(Precio(cancha=cancha, precio=precio))
    if nuevas:
        db.commit()
    return nuevas
