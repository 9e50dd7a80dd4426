"""Input/output components for authorsplit.

This package contains plain-text document loading and token export helpers
used by the CLI.
"""

from .document_loader import load_document
from .token_export import dump_token_payload, save_token_payload, token_payload

__all__ = ["dump_token_payload", "load_document", "save_token_payload", "token_payload"]
