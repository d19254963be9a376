# archivo/shared/schemas/common.py
from pydantic import BaseModel, ConfigDict
from typing import Any


class CamelModel(BaseModel):
    """Base para cuerpos de petición: ignora campos desconocidos"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class MessageIdResponse(MessageResponse):
    id: str


def is_blank(value: Any) -> bool:
    """True si el valor falta o es una cadena vacía"""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def empty_list(message: str) -> dict:
    """Respuesta 200 de una colección vacía"""
    return {"message": message, "data": []}
