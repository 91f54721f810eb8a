"""Provider-named translation namespaces."""

from . import anthropic, openai

__all__ = ["anthropic", "openai"]
