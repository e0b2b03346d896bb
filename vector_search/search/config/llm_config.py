"""
llm_config.py — Completion Settings
====================================
Every completion call is controlled from here.
No temperatures or max_tokens should be hardcoded inside service files.

Temperature 0.0 keeps answers deterministic for identical prompts.
"""

# Python Packages
from decouple import config



# ── Documentation Answer ───────────────────────────────────────────────────────
# The model itself is chosen by the provider (see vendors/factory.py).
COMPLETION_TEMPERATURE = config("COMPLETION_TEMPERATURE", default = 0.0, cast = float)
COMPLETION_MAX_TOKENS  = config("COMPLETION_MAX_TOKENS", default = 1024, cast = int)
