"""
Application factory
"""

# Python Packages
import atexit
from dataclasses import dataclass

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .config.swagger import build_api
from .config.urls import URLs
from .config.database import init_db, db
from .config.logging_config import setup_logging, get_logger

# Constants
from .base import constants

# Vendors
from .vendors import get_chat_service, get_embedding_service
from .vendors.openai import OpenAIClient

# Services
from .search.controller import EXTENSION_KEY
from .search.services import (
    DocumentStore,
    RetrievalService,
    ContextBuilder,
    HistoryService,
    PromptComposer,
    PersistenceWriter,
    QueryService,
)

logger = get_logger(__name__)





@dataclass
class SearchServices:
    """ Process-wide collaborators, built once and shared by all requests... """

    query_service: QueryService
    persistence_writer: PersistenceWriter



def build_services() -> SearchServices:
    """
    Wire the production pipeline: one OpenAI client shared by embeddings
    and (when selected) completions, one store, one persistence worker pool.
    """

    openai_client = OpenAIClient()
    embedding_service = get_embedding_service(openai_client = openai_client)

    if embedding_service.get_embedding_dimension() != constants.EMBEDDING_DIMENSION:
        logger.warning(
            f"Embedding model {embedding_service.default_model} does not produce "
            f"{constants.EMBEDDING_DIMENSION}-dim vectors; stored vectors will not match"
        )

    store = DocumentStore()
    persistence_writer = PersistenceWriter(store)

    query_service = QueryService(
        embedding_service = embedding_service,
        retrieval_service = RetrievalService(store),
        context_builder = ContextBuilder(),
        history_service = HistoryService(store),
        prompt_composer = PromptComposer(),
        chat_service = get_chat_service(openai_client = openai_client),
        persistence_writer = persistence_writer
    )

    return SearchServices(query_service = query_service, persistence_writer = persistence_writer)



def create_app(test_config: dict = None, services: SearchServices = None):
    """
    Application Factory

    Args:
        test_config: Flask config overrides (e.g. TESTING, SQLALCHEMY_DATABASE_URI)
        services: Pre-built services; production wiring is used when omitted
    """

    setup_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"

    if test_config:
        app.config.update(test_config)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app)

    # Search pipeline
    services = services or build_services()
    app.extensions[EXTENSION_KEY] = services
    atexit.register(services.persistence_writer.shutdown)

    # Initialize Swagger & register namespaces
    api = build_api()
    URLs.add_namespaces(api)
    api.init_app(app)

    return app
