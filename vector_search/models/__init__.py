"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy
and Flask-Migrate.
"""

from .page_section import PageSection
from .chat_turn import ChatTurn

__all__ = [
    "PageSection",
    "ChatTurn",
]
