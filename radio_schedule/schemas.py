from pydantic import BaseModel, Field


class ScheduleItemResponse(BaseModel):
    """Single scheduled program"""
    start_at: float = Field(..., description="Start time in milliseconds since the Unix epoch")
    end_at: float = Field(..., description="End time in milliseconds since the Unix epoch")
    name: str = Field(..., description="Program title, empty if unknown")
    description: str = Field(..., description="Program description, empty if unknown")
    hosts: list[str] = Field(..., description="Host display names in page order")


class ErrorDetail(BaseModel):
    """Standard error detail"""
    code: str = Field(..., description="Error code (e.g., 'SCRIPT_MISSING', 'JS_VALUE_MISMATCH')")
    message: str = Field(..., description="Human-readable error message")
    context: dict | None = Field(None, description="Additional context about the error")


class StandardErrorResponse(BaseModel):
    """Standardized error response for all endpoints"""
    status: str = Field("error", description="Status indicator")
    timestamp: str = Field(..., description="ISO8601 timestamp of error")
    error: ErrorDetail = Field(..., description="Error details")
