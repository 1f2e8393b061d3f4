"""
FastAPI server for the ShopChat assistant.

Usage:
    python -m shopchat.api.server
    # or
    uvicorn shopchat.api.server:app --reload --port 8000
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Optional
import os
import uuid
import json
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from shopchat import __version__
from shopchat.api.models import (
    ChatRequest,
    ChatResponse,
    MessageModel,
    SessionResponse,
    ResetRequest,
    ResetResponse,
    HealthResponse,
)
from shopchat.core.config import get_config
from shopchat.core.controller import ConversationController
from shopchat.data.catalog_store import CatalogStore
from shopchat.utils.logger import get_logger

logger = get_logger("api.server")

# Conversation logging for production
CONVERSATION_LOG_DIR = Path(os.getenv("CONVERSATION_LOG_DIR", "logs/sessions"))


def log_conversation(
    session_id: str,
    user_message: str,
    reply: str,
    intent: Optional[str],
):
    """Log conversation turn to per-session JSONL file."""
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "user_message": user_message,
        "intent": intent,
        "reply": reply,
    }

    session_log_file = CONVERSATION_LOG_DIR / f"{session_id}.jsonl"
    try:
        CONVERSATION_LOG_DIR.mkdir(parents=True, exist_ok=True)
        with open(session_log_file, "a") as f:
            f.write(json.dumps(log_entry) + "\n")
    except Exception as e:
        logger.error(f"Failed to write conversation log: {e}")

    logger.info(f"CONVERSATION [{session_id}]: {json.dumps(log_entry)}")


# Initialize FastAPI app
app = FastAPI(
    title="ShopChat API",
    description="Catalog question answering for the back-office chat assistant",
    version=__version__
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Session storage: session_id -> ConversationController
sessions: Dict[str, ConversationController] = {}

# One store (and HTTP connection pool) shared by all sessions
_store: Optional[CatalogStore] = None


def get_store() -> CatalogStore:
    global _store
    if _store is None:
        _store = CatalogStore(config=get_config())
    return _store


def get_or_create_session(session_id: Optional[str] = None) -> tuple[str, ConversationController]:
    """Get existing session or create new one."""
    if session_id and session_id in sessions:
        return session_id, sessions[session_id]

    new_session_id = session_id or str(uuid.uuid4())
    sessions[new_session_id] = ConversationController(store=get_store(), config=get_config())
    logger.info(f"Created new session: {new_session_id}")
    return new_session_id, sessions[new_session_id]


@app.on_event("shutdown")
async def shutdown_event():
    global _store
    if _store is not None:
        await _store.close()
        _store = None


# API Endpoints

@app.get("/", response_model=HealthResponse)
async def root():
    """Health check endpoint."""
    config = get_config()
    return HealthResponse(
        status="online",
        service="ShopChat API",
        version=__version__,
        config={
            "store_configured": bool(config.supabase_url and config.supabase_key),
            "request_timeout": config.request_timeout,
            "listing_sample_size": config.listing_sample_size,
        }
    )


@app.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """
    Main conversation endpoint.

    Answers one user message and appends both sides to the session log.
    """
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    try:
        session_id, controller = get_or_create_session(request.session_id)

        reply = await controller.submit_message(request.message)
        intent = controller.last_intent.value if controller.last_intent else None

        log_conversation(
            session_id=session_id,
            user_message=request.message,
            reply=reply.text,
            intent=intent,
        )

        return ChatResponse(
            reply=reply.text,
            session_id=session_id,
            intent=intent,
            messages_count=len(controller.messages),
        )

    except Exception as e:
        import traceback
        logger.error(f"Error in /chat: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/session/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str):
    """Get the conversation log of a session."""
    if session_id not in sessions:
        raise HTTPException(status_code=404, detail="Session not found")

    controller = sessions[session_id]
    return SessionResponse(
        session_id=session_id,
        messages=[
            MessageModel(text=m.text, is_from_user=m.is_from_user)
            for m in controller.messages
        ],
    )


@app.post("/session/reset", response_model=ResetResponse)
async def reset_session(request: ResetRequest):
    """Reset a session, or create a fresh one if no ID is given."""
    if request.session_id and request.session_id in sessions:
        sessions[request.session_id].reset_session()
        return ResetResponse(session_id=request.session_id, status="reset")

    session_id, _ = get_or_create_session(request.session_id)
    return ResetResponse(session_id=session_id, status="created")


if __name__ == "__main__":
    import uvicorn

    print("=" * 60)
    print("ShopChat API Server")
    print("=" * 60)
    print("API Documentation: http://localhost:8000/docs")
    print("")
    print("Environment variables:")
    print("  SUPABASE_URL / SUPABASE_KEY - catalog store credentials")
    print("  LOG_LEVEL                   - logging level (default INFO)")
    print("  CONVERSATION_LOG_DIR        - where per-session JSONL logs go")
    print("=" * 60)

    uvicorn.run(app, host="0.0.0.0", port=8000)
