"""
Errores de la API.

Cada error conoce su status HTTP; main.py los traduce a {"error": mensaje}.
"""
from fastapi import status


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Error interno"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Faltan datos"


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No autorizado"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Ese horario ya está ocupado"


class InternalError(ApiError):
    pass
