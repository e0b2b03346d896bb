from .search_validation import SearchValidation

__all__ = ["SearchValidation"]
