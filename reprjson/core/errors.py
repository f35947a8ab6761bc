"""Exception raised by callers that turn a failed conversion into an error."""

from __future__ import annotations

EMPTY_INPUT = "EMPTY_INPUT"
CONVERSION_FAILED = "CONVERSION_FAILED"


class ConversionError(ValueError):
    """A conversion that could not produce JSON.

    Attributes:
        message: Short summary, e.g. ``"Conversion failed"``.
        code: Machine-readable reason (``EMPTY_INPUT`` / ``CONVERSION_FAILED``).
        detail: Longer explanation suitable for showing to a user.
    """

    def __init__(self, message: str, code: str, detail: str = "") -> None:
        super().__init__(f"{message}: {detail}" if detail else message)
        self.message = message
        self.code = code
        self.detail = detail
