# =============================================================================
# core/errors.py  —  Error types raised by the core
# =============================================================================
#
# Core functions RAISE these; the tools/ layer catches DealDeskError and turns
# it into an {"error": ...} dict for the agent.  Nothing in core/ ever returns
# a half-finished result alongside an error.
#
#   DealDeskError
#     ├── ValidationError     bad or missing tool arguments
#     ├── UnknownScopeError   category outside all / business / legacy
#     └── StoreAccessError    a memory note exists but can't be read/written
# =============================================================================

from typing import Optional


class DealDeskError(Exception):
    """Base class for every error the core raises."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        # What the agent should relay to the user.  Defaults to the message.
        self.user_message = user_message or message


class ValidationError(DealDeskError):
    """A required argument is missing, empty, or out of range."""


class UnknownScopeError(DealDeskError):
    """A category/scope string that isn't one of the recognized values."""

    def __init__(self, value: str, allowed: list[str]):
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Unknown category {value!r}; expected one of {', '.join(allowed)}."
        )


class StoreAccessError(DealDeskError):
    """A memory collection exists but one of its notes couldn't be accessed."""

    def __init__(
        self,
        message: str,
        collection: str,
        original_error: Optional[Exception] = None,
        action: str = "read",
    ):
        super().__init__(
            message,
            user_message=f"Couldn't {action} the {collection} memory collection.",
        )
        self.collection = collection
        self.action = action
        self.original_error = original_error

    def __str__(self):
        if self.original_error:
            return (
                f"{self.message} (Caused by: "
                f"{type(self.original_error).__name__}: {self.original_error})"
            )
        return self.message
