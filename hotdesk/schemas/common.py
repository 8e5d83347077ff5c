from pydantic import BaseModel


# Outcome of a mutating operation; multi-seat calls are all-or-nothing
class OperationResult(BaseModel):
    success: bool = True
    message: str


# Error responses (rendered by the BookingError handler)
class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
