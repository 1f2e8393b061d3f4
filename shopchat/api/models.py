"""
Pydantic models for ShopChat API requests and responses.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class ChatRequest(BaseModel):
    """Request model for chat endpoint."""
    message: str = Field(description="User's message")
    session_id: Optional[str] = Field(default=None, description="Session ID (auto-generated if not provided)")


class ChatResponse(BaseModel):
    """Response model for chat endpoint."""
    reply: str = Field(description="Assistant reply")
    session_id: str = Field(description="Session ID")
    intent: Optional[str] = Field(default=None, description="Detected intent category")
    messages_count: int = Field(default=0, description="Entries in the conversation log, greeting included")


class MessageModel(BaseModel):
    text: str
    is_from_user: bool


class SessionResponse(BaseModel):
    """Response model for session state endpoint."""
    session_id: str
    messages: List[MessageModel]


class ResetRequest(BaseModel):
    """Request model for session reset."""
    session_id: Optional[str] = None


class ResetResponse(BaseModel):
    """Response model for session reset."""
    session_id: str
    status: str


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str
    service: str
    version: str
    config: Dict[str, Any]
