""" Database configuration and initialization... """

# Python Packages
from flask_sqlalchemy import SQLAlchemy

# Constants
from ..base import constants





class Database:
    """
    Handles database configuration
    """

    def __init__(self):
        self.host = constants.DB_HOST
        self.port = constants.DB_PORT
        self.user = constants.DB_USER
        self.password = constants.DB_PASSWORD
        self.database = constants.DB_NAME
        self.statement_timeout = constants.STORE_TIMEOUT

    def get_database_uri(self):
        """
        Build PostgreSQL URI dynamically
        """
        return (
            f"postgresql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    def get_engine_options(self):
        """
        Every statement is bounded server-side; a cancelled statement
        surfaces as SQLSTATE 57014.
        """
        return {
            "pool_pre_ping": True,
            "connect_args": {
                "options": f"-c statement_timeout={self.statement_timeout}"
            }
        }


# Global SQLAlchemy object
db = SQLAlchemy()


def init_db(app):
    """
    Initialize database with Flask app.
    A pre-set SQLALCHEMY_DATABASE_URI (tests, tooling) is left untouched.
    """
    database = Database()

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = database.get_database_uri()

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("postgresql"):
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", database.get_engine_options())

    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    db.init_app(app)
