"""FastAPI dependencies shared by the message routes."""

from fastapi import Depends

from footform.services.dialogue_engine import DialogueEngine
from footform.services.session_store import SessionStore, get_session_store


def get_dialogue_engine(store: SessionStore = Depends(get_session_store)) -> DialogueEngine:
    """Dialogue engine bound to the active session store."""
    return DialogueEngine(store)
