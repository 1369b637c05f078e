from fastapi import status
from fastapi.encoders import jsonable_encoder


def envelope(data=None, message: str = "ok", code: int = status.HTTP_200_OK) -> dict:
    """Wrap a payload the way every successful response is shaped."""
    return {"code": code, "message": message, "data": jsonable_encoder(data)}
