"""CLI helpers for USERFIELDS.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, and the logger-level option parser.
"""

from .messages import error, success

__all__ = ["error", "success"]
