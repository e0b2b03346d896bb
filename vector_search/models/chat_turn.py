"""
Model: ChatTurn
Table: <DB_SCHEMA>.chat_history

One role-tagged message of a past exchange. Each answered query writes two
rows sharing an exchange_id: the user's question and the assistant's answer,
both carrying the question's embedding so either can be found by similarity.

Rows are append-only; nothing in the service updates them.
"""

# Python Packages
from sqlalchemy import func
from sqlalchemy.dialects.postgresql import TEXT
from pgvector.sqlalchemy import Vector

# Database
from ..config.database import db

# Constants
from ..base import constants





class ChatTurn(db.Model):
    """ One persisted conversation turn... """

    # Table Name
    __tablename__ = "chat_history"
    __table_args__ = {"schema": constants.DB_SCHEMA}

    turn_id = db.Column(db.BigInteger, primary_key = True, autoincrement = True)

    exchange_id = db.Column(
        db.String(36),
        nullable = False,
        index = True,
        doc = "UUID shared by the user and assistant turns of one exchange."
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "'user' or 'assistant'."
    )

    content = db.Column(TEXT, nullable = False)

    topic = db.Column(
        db.String(255),
        nullable = True,
        doc = "Topic label the question was asked under."
    )

    embedding = db.Column(Vector(constants.EMBEDDING_DIMENSION), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    def __repr__(self):
        return f"<ChatTurn {self.turn_id} role={self.role}>"
