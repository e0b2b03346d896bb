""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "PREFLIGHT_OK"              :   "ok",
    "HEALTH_OK"                 :   "ok",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "MISSING_QUERY"             :   "Missing query in request data",
    "INVALID_QUERY"             :   "Query must be a string",
    "EMPTY_EMBEDDING_INPUT"     :   "Text to embed must not be empty",

    # Provider Errors
    "EMBEDDING_FAILED"          :   "Failed to create embedding for question",
    "EMBEDDING_MALFORMED"       :   "Embedding provider returned a malformed payload",
    "COMPLETION_FAILED"         :   "Failed to generate completion",
    "COMPLETION_EMPTY"          :   "Completion provider returned no choices",

    # Store Errors
    "MATCH_SECTIONS_FAILED"     :   "Failed to match page sections",
    "COMBINE_CONTENT_FAILED"    :   "Failed to combine corpus content",
    "MATCH_HISTORY_FAILED"      :   "Failed to match conversation history",
    "INSERT_TURN_FAILED"        :   "Failed to record conversation turn",

    # General Errors
    "GENERIC_FAILURE"           :   "There was an error processing your request",
    "TIMEOUT"                   :   "The request timed out while waiting on an upstream service",
}

