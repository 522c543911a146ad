import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Dict

from canchas_api.core.errors import BadRequest, InternalError
from canchas_api.crud import precio as crud
from canchas_api.database import get_db
from canchas_api.schemas.admin import Ok
from canchas_api.schemas.precio import PrecioUpdate
from canchas_api.services.auth import require_admin

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/precios", response_model=Dict[str, int])
def read_precios(db: Session = Depends(get_db)):
    try:
        return crud.get_precios(db)
    except SQLAlchemyError as exc:
        logger.exception("Error al obtener precios")
        raise InternalError("Error al obtener precios") from exc


@router.post("/admin/precios", response_model=Ok)
def update_precio(
    data: PrecioUpdate,
    db: Session = Depends(get_db),
    _: str = Depends(require_admin),
):
    # precio = 0 es válido: se chequea presencia, no veracidad
    if data.cancha is None or not data.cancha.strip() or data.precio is None:
        raise BadRequest("Faltan datos")
    if data.precio < 0:
        raise BadRequest("El precio no puede ser negativo")

    try:
        updated = crud.update_precio(db, cancha=data.cancha, precio=data.precio)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error al actualizar precio de %s", data.cancha)
        raise InternalError("Error al actualizar precio") from exc

    if not updated:
        logger.warning("Precio no actualizado: cancha desconocida %r", data.cancha)
    else:
        logger.info("Precio de %s actualizado a %s", data.cancha, data.precio)
    return {"ok": True}
