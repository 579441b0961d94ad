from typing import Generic, TypeVar, Optional, List
from pydantic import BaseModel

T = TypeVar("T")

class APIResponse(BaseModel, Generic[T]):
    """
    Standard API response wrapper.
    """
    success: bool = True
    message: str = "success"
    data: Optional[T] = None

class ValidationErrorDetail(BaseModel):
    """
    Structure for a single validation error.
    """
    field: str
    message: str

class ValidationErrorResponse(BaseModel):
    """
    Response schema for validation errors (400 Bad Request).
    """
    success: bool = False
    message: str = "Validation Error"
    code: str = "VALIDATION_ERROR"
    errors: List[ValidationErrorDetail]

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "message": "Validation Error",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "notification_id",
                        "message": "Field required"
                    }
                ]
            }
        }
    }

class ErrorResponse(BaseModel):
    """
    Standard schema for other failures (401, 404, 429, 500).
    """
    success: bool = False
    message: str
    code: Optional[str] = None

class MessageResponse(BaseModel):
    """
    Envelope for operations that only report an outcome.
    """
    success: bool = True
    message: str
