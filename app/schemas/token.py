from pydantic import BaseModel

class TokenPayload(BaseModel):
    """
    Schema for decoding JWT payload.
    """
    sub: str | None = None
