"""In-memory bindable field.

For headless use (server-side form handling, CLIs) and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class InMemoryField:
    """Field holding a value and recording validator feedback.

    Attributes:
        value: Current text (None = nothing entered)
        label: Human-readable field name
        is_valid: None until first feedback, then True/False
        error_message: Message from the last mark_invalid() call
        feedback_count: Number of feedback calls received
    """

    value: str | None = None
    label: str = ""
    is_valid: bool | None = field(default=None, init=False)
    error_message: str | None = field(default=None, init=False)
    feedback_count: int = field(default=0, init=False)

    def mark_valid(self) -> None:
        self.is_valid = True
        self.error_message = None
        self.feedback_count += 1

    def mark_invalid(self, message: str | None) -> None:
        self.is_valid = False
        self.error_message = message
        self.feedback_count += 1

    def reset(self) -> None:
        """Forget feedback state. Value and label are kept."""
        self.is_valid = None
        self.error_message = None
        self.feedback_count = 0
