"""
Search Controller
Orchestrates between handler and service layer.
"""

# Python Packages
from typing import Optional

from flask import current_app

# Types
from .types import QueryResult


EXTENSION_KEY = "vector_search"





class SearchController:

    def __init__(self, services = None):
        """ Use the services wired by create_app() unless given explicitly... """

        services = services or current_app.extensions[EXTENSION_KEY]
        self.query_service = services.query_service



    def ask(self, query: Optional[str], topic_label: Optional[str] = None) -> QueryResult:
        """
        Answer a documentation question.

        Args:
            query: Raw `query` parameter (validated by the pipeline).
            topic_label: Optional `name` parameter used for prompt phrasing.

        Returns:
            QueryResult with the generated answer.
        """

        return self.query_service.answer_question(
            query = query,
            topic_label = topic_label
        )
