import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from canchas_api import config
from canchas_api.core.errors import ApiError
from canchas_api.database import engine
from canchas_api.init_db import init_db
from canchas_api.routers import admin, precios, reservas

# Configure base logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("canchas_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(engine)
    yield


app = FastAPI(
    title="Canchas API",
    description="API de reservas de canchas: disponibilidad, reservas, precios y panel de admin",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(admin.router, prefix="/admin", tags=["admin"])
app.include_router(precios.router, tags=["precios"])
app.include_router(reservas.router, tags=["reservas"])


@app.get("/health")
def health():
    return {"ok": True}


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request | path=%s | errors=%s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Datos inválidos"})


# Global unhandled exception handler -> logs ERROR
@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error | path=%s | method=%s | client=%s",
        request.url.path,
        request.method,
        request.client.host if request.client else "unknown",
    )
    return JSONResponse(status_code=500, content={"error": "Error interno"})


if __name__ == "__main__":
    uvicorn.run("canchas_api.main:app", host="0.0.0.0", port=config.PORT)
