"""Utils Module"""

from .sanitizer import sanitize_args, sanitize_for_log

__all__ = ["sanitize_args", "sanitize_for_log"]
