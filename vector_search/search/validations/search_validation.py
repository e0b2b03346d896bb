"""
Search validation for the vector-search endpoint.
"""

# Exceptions
from ...util.exceptions import UserError

# Messages
from ...util import messages





class SearchValidation:

    @staticmethod
    def validate_query(query) -> str:
        """
        Reject a missing or blank query before any external call.

        Returns:
            The trimmed query.
        """
        if query is None:
            raise UserError(messages.ERROR["MISSING_QUERY"])

        if not isinstance(query, str):
            raise UserError(
                messages.ERROR["INVALID_QUERY"],
                data = {"type": type(query).__name__}
            )

        if not query.strip():
            raise UserError(messages.ERROR["MISSING_QUERY"])

        return query.strip()
