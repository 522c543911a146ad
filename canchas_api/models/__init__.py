from canchas_api.models.reserva import Reserva, EstadoReserva
from canchas_api.models.precio import Precio

# This makes the models directory a Python package and ensures all models are loaded
