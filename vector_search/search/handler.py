"""
Search Handler
API endpoints for the documentation vector search.
"""

# Python Packages
from flask import request, Response
from flask_restx import Namespace, Resource

# Controller
from .controller import SearchController

# Exceptions & messages
from ..util.exceptions import AppException, UserError, ProviderTimeout, InternalError
from ..util import messages

# Logging
from ..config.logging_config import get_logger

logger = get_logger(__name__)

# Namespaces
search_namespace = Namespace("vector-search", description = "Documentation question answering")
health_namespace = Namespace("health", description = "Liveness probe")

# Browser callers hit this endpoint cross-origin
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}





def error_response(error: AppException):
    """
    Map an AppException to (body, status, headers), logging it the way
    its kind requires. Internal details never reach the body.
    """

    if isinstance(error, UserError):
        logger.info(f"Rejected request: {error.message}")
    elif isinstance(error, InternalError):
        logger.error(f"Unexpected error: {error.details}", exc_info = error.__cause__ or error)
    elif isinstance(error, ProviderTimeout):
        logger.error(f"⏱️  {error}: {error.details}")
    else:
        logger.error(f"❌ {error}: {error.details}")

    return error.to_dict(), error.status_code, CORS_HEADERS



# ── GET /vector-search ────────────────────────────────────────────────────────
@search_namespace.route("")
class VectorSearch(Resource):
    """ Answer a question from the documentation... """

    @search_namespace.doc(params = {
        "query": "The question to answer (required)",
        "name":  "Topic label used to phrase the prompt (optional)"
    })
    def get(self):
        """
        Ask a question.

        Request:
            GET /vector-search?query=What is due next week?&name=CS 499

        Response:
            200 text/plain  — the generated answer (markdown)
            400 JSON        — {"error": "Missing query in request data"}
            500 / 504 JSON  — {"error": "<generic message>"}
        """

        try:
            result = SearchController().ask(
                query = request.args.get("query"),
                topic_label = request.args.get("name")
            )

            return Response(
                result.answer,
                status = 200,
                headers = CORS_HEADERS,
                content_type = "text/plain; charset=utf-8"
            )

        except AppException as error:
            return error_response(error)

        except Exception as error:
            wrapped = InternalError(details = repr(error))
            wrapped.__cause__ = error
            return error_response(wrapped)


    def options(self):
        """ CORS preflight... """

        return Response(messages.SUCCESS["PREFLIGHT_OK"], status = 200, headers = CORS_HEADERS)



# ── GET /health ───────────────────────────────────────────────────────────────
@health_namespace.route("")
class Health(Resource):
    """ Liveness probe — touches no external service... """

    def get(self):
        return {"status": messages.SUCCESS["HEALTH_OK"]}, 200
