"""
search_config.py — Retrieval, Budget & History Settings
========================================================
Every tunable of the retrieval pipeline lives here. Values can be
overridden from the environment (.env) without touching service files.

To tune retrieval quality:
  - Raise MATCH_THRESHOLD     → fewer, more relevant sections (more fallbacks)
  - Raise MATCH_COUNT         → more candidates, bigger prompts
  - Raise MIN_CONTENT_LENGTH  → skip heading-only or near-empty sections
"""

# Python Packages
from decouple import config, Choices


# ── Retrieval Presets ──────────────────────────────────────────────────────────
# Two parameter sets have been used in production:
#   strict — high threshold, up to 10 substantial sections
#   broad  — low threshold, single best section, tiny minimum length
RETRIEVAL_PRESETS = {
    "strict": {"threshold": 0.78, "count": 10, "min_content_length": 50},
    "broad":  {"threshold": 0.18, "count": 1,  "min_content_length": 9},
}

RETRIEVAL_PROFILE = config(
    "RETRIEVAL_PROFILE", default = "strict", cast = Choices(list(RETRIEVAL_PRESETS))
)

_preset = RETRIEVAL_PRESETS[RETRIEVAL_PROFILE]

# ── Similarity Search ──────────────────────────────────────────────────────────
MATCH_THRESHOLD    = config("MATCH_THRESHOLD", default = _preset["threshold"], cast = float)
MATCH_COUNT        = config("MATCH_COUNT", default = _preset["count"], cast = int)
MIN_CONTENT_LENGTH = config("MIN_CONTENT_LENGTH", default = _preset["min_content_length"], cast = int)

# ── Context Budget ─────────────────────────────────────────────────────────────
# Size of retrieved text injected into the prompt.
# "tokens" counts with tiktoken (cl100k_base), "characters" with len().
CONTEXT_BUDGET      = config("CONTEXT_BUDGET", default = 1500, cast = int)
CONTEXT_BUDGET_UNIT = config(
    "CONTEXT_BUDGET_UNIT", default = "tokens", cast = Choices(["tokens", "characters"])
)
TOKENIZER_ENCODING  = "cl100k_base"

# Delimiter line written after every section in the context block
PASSAGE_SEPARATOR = "\n---\n"

# When no section matches, the whole corpus is used verbatim.
# Set True to budget the fallback text section-by-section like ranked results.
FALLBACK_ENFORCE_BUDGET = config("FALLBACK_ENFORCE_BUDGET", default = False, cast = bool)

# ── History Window ─────────────────────────────────────────────────────────────
# "similarity" — most similar past turns first (store order)
# "recency"    — latest turns, returned oldest → newest
HISTORY_STRATEGY = config(
    "HISTORY_STRATEGY", default = "similarity", cast = Choices(["similarity", "recency"])
)
HISTORY_LIMIT           = config("HISTORY_LIMIT", default = 6, cast = int)
HISTORY_MATCH_THRESHOLD = config("HISTORY_MATCH_THRESHOLD", default = 0.5, cast = float)

# ── Persistence ────────────────────────────────────────────────────────────────
# Turns are written on a background worker after the answer is ready.
PERSIST_ASYNC       = config("PERSIST_ASYNC", default = True, cast = bool)
PERSIST_MAX_WORKERS = config("PERSIST_MAX_WORKERS", default = 2, cast = int)
