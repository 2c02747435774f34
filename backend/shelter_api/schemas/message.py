"""Message Schema - the flat {"message": ...} body used for confirmations and errors."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
