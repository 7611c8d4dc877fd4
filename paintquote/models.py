from sqlalchemy import Column, String, DateTime, JSON
from datetime import datetime
from .database import Base


class QuoteSession(Base):
    """One chat conversation collecting a ConversationContext."""
    __tablename__ = "quote_sessions"

    id = Column(String, primary_key=True)  # UUID
    context_json = Column(JSON, default=dict)  # Accumulated ConversationContext
    messages_json = Column(JSON, default=list)  # Conversation history
    quote_json = Column(JSON, nullable=True)  # Simple quote, once priced
    status = Column(String, default="active")  # 'active' | 'completed'
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
