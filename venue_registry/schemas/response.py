"""
Generic response envelopes
"""

from pydantic import BaseModel, Field
from typing import Any, Optional, Dict, List, Generic, TypeVar

T = TypeVar('T')


class SuccessResponse(BaseModel, Generic[T]):
    """Single-record success envelope"""
    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Paginated list envelope"""
    success: bool = True
    count: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    data: List[T]


class MessageResponse(BaseModel):
    """Simple message response"""
    success: bool = True
    message: str


class ErrorDetail(BaseModel):
    """Error detail schema"""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = {}


class ErrorResponse(BaseModel):
    """Error envelope produced by the central error handlers"""
    success: bool = False
    error: ErrorDetail
