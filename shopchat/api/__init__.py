"""
API module for ShopChat.

Provides REST API endpoints for the chat widget.
"""
from shopchat.api.models import (
    ChatRequest,
    ChatResponse,
    SessionResponse,
    ResetRequest,
    ResetResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "SessionResponse",
    "ResetRequest",
    "ResetResponse",
]
