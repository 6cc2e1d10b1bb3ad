"""Scoped context fields for structured logging.

Fields pushed here (story_id, posting_id, ...) are merged into every log
record emitted while they are active. Backed by contextvars, so each thread
and task sees its own stack.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("hnhiring_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context.

    Returns:
        Dictionary of the fields currently in scope
    """
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the logging context.

    Later pushes win over earlier fields of the same name.

    Args:
        **kwargs: Fields to add to every record emitted in scope

    Returns:
        Token for pop_log_context()

    Example:
        >>> token = push_log_context(story_id=888)
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context().

    Args:
        token: Token returned by push_log_context()
    """
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly useful in tests."""
    LogContextVar.set({})


class log_context:
    """Context manager that pushes fields on entry and restores on exit.

    Example:
        >>> with log_context(story_id=888, posting_id="12345"):
        ...     logger.info("Building posting")
    """

    def __init__(self, **kwargs):
        """Initialize log_context.

        Args:
            **kwargs: Fields to push while the block runs
        """
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        """Push the fields and return self."""
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore the previous context; exceptions propagate."""
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
