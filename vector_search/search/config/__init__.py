"""
search/config/__init__.py
=========================
Public surface of the search configuration package.

Config files:
  search_config — retrieval thresholds, context budget, history window
  llm_config    — completion model, temperature & max_tokens
  prompts       — versioned system / user prompt templates
"""

from . import search_config
from . import llm_config
from . import prompts
