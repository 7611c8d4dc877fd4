"""
Quote Session API — chat-driven intake of a ConversationContext.

POST /api/session/start           — Start a new conversation, get the first question
POST /api/session/{id}/message    — Send a chat message, get the extracted fields + next question
GET  /api/session/{id}/status     — Current context and completion status
POST /api/session/{id}/quote      — Price a completed session (once)
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from .. import models
from ..conversation import (
    PROVIDE_BREAKDOWN,
    apply_patch,
    enhanced_parse_message,
    get_completion_status,
    get_next_question,
    parse_message,
)
from ..database import get_db
from ..formatting import format_currency
from ..pricing_engine import PricingEngine, SimplifiedContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["quote-session"])

# Stateless, shared across requests
pricing = PricingEngine()

PARSERS = {
    "enhanced": enhanced_parse_message,
    "simple": parse_message,
}


# --- Request/Response schemas ---

class StartSessionRequest(BaseModel):
    message: Optional[str] = None  # Optional opening message, parsed like any other


class MessageRequest(BaseModel):
    message: str
    parser: str = "enhanced"  # 'enhanced' | 'simple'


# --- Endpoints ---

@router.post("/start")
def start_session(request: Optional[StartSessionRequest] = None, db: Session = Depends(get_db)):
    """
    Start a new conversation.
    An opening message (e.g. a full data dump) is parsed straight away.
    """
    session = models.QuoteSession(
        id=str(uuid.uuid4()),
        context_json={},
        messages_json=[],
        status="active",
    )
    db.add(session)
    db.commit()
    logger.info("Started quote session %s", session.id)

    if request and request.message:
        return _handle_message(session, request.message, enhanced_parse_message, db)

    return {
        "session_id": session.id,
        "next_question": get_next_question({}),
        "context": {},
        "completion": get_completion_status({}),
    }


@router.post("/{session_id}/message")
def send_message(session_id: str, request: MessageRequest, db: Session = Depends(get_db)):
    """Parse one chat message into the session's context."""
    session = _get_active_session(session_id, db)

    parse = PARSERS.get(request.parser)
    if parse is None:
        raise HTTPException(status_code=400, detail=f"Unknown parser: {request.parser}")

    return _handle_message(session, request.message, parse, db)


@router.get("/{session_id}/status")
def get_status(session_id: str, db: Session = Depends(get_db)):
    session = _get_session(session_id, db)
    context = dict(session.context_json or {})
    return {
        "session_id": session.id,
        "status": session.status,
        "context": context,
        "next_question": get_next_question(context),
        "completion": get_completion_status(context),
        "message_count": len(session.messages_json or []),
        "quote": session.quote_json,
    }


@router.post("/{session_id}/quote")
def price_session(session_id: str, db: Session = Depends(get_db)):
    """
    Price a completed session and close it. A context is consumed once —
    a second call on the same session is rejected.
    """
    session = _get_active_session(session_id, db)
    context = dict(session.context_json or {})

    completion = get_completion_status(context)
    if not completion["is_complete"]:
        raise HTTPException(
            status_code=400,
            detail=f"Session incomplete, missing: {', '.join(completion['required_missing'])}",
        )

    outcome = pricing.price(SimplifiedContext(context=context))
    if not outcome.ok:
        raise HTTPException(status_code=400, detail=outcome.errors)

    session.quote_json = outcome.quote
    session.status = "completed"
    session.updated_at = datetime.utcnow()
    db.commit()
    logger.info("Priced quote session %s: $%s", session.id, outcome.quote["total"])

    return {
        "session_id": session.id,
        "context": context,
        "quote": outcome.quote,
        "formatted_total": format_currency(outcome.quote["total"]),
    }


# --- Helpers ---

def _get_session(session_id: str, db: Session) -> models.QuoteSession:
    session = db.query(models.QuoteSession).filter(
        models.QuoteSession.id == session_id,
    ).first()
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _get_active_session(session_id: str, db: Session) -> models.QuoteSession:
    session = _get_session(session_id, db)
    if session.status != "active":
        raise HTTPException(status_code=400, detail=f"Session is {session.status}, not active")
    return session


def _handle_message(session: models.QuoteSession, message: str, parse, db: Session) -> dict:
    """Run a parser over one message, store the merged context and history."""
    context = dict(session.context_json or {})
    result = parse(message, context)

    if result.get("reset"):
        logger.info("Quote session %s reset by user", session.id)
        context = {}
    else:
        context = apply_patch(context, result["extracted_info"])

    messages = list(session.messages_json or [])
    now = datetime.utcnow().isoformat()
    messages.append({"role": "user", "content": message, "timestamp": now})
    if result["next_question"] and result["next_question"] != PROVIDE_BREAKDOWN:
        messages.append({"role": "assistant", "content": result["next_question"], "timestamp": now})

    # Update session; flag_modified needed for JSON columns on SQLite
    session.context_json = context
    session.messages_json = messages
    session.updated_at = datetime.utcnow()
    flag_modified(session, "context_json")
    flag_modified(session, "messages_json")
    db.commit()

    response = {
        "session_id": session.id,
        "extracted_info": result["extracted_info"],
        "next_question": result["next_question"],
        "is_complete": result["is_complete"],
        "reset": result.get("reset", False),
        "context": context,
        "completion": get_completion_status(context),
    }

    # Preview price once everything needed is known
    if response["completion"]["is_complete"]:
        outcome = pricing.price(SimplifiedContext(context=context))
        if outcome.ok:
            response["quote_preview"] = outcome.quote

    return response
