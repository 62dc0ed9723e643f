"""
src/assessment/errors.py
=========================
Assessment failures detected locally after the remote call returns.

Transport and credential errors raised by the Google Cloud client are NOT
wrapped here; they propagate to the caller unchanged.
"""


class AssessmentError(Exception):
    """Base class for assessment failures reported by this package."""


class InvalidTokenError(AssessmentError):
    """Raised when reCAPTCHA Enterprise reports the token as invalid."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            "The Create Assessment call failed because the token was invalid "
            f"for the following reason: {reason}"
        )


class ActionMismatchError(AssessmentError):
    """Raised when the token's recorded action differs from the expected one."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The action attribute '{actual}' in your reCAPTCHA tag does not "
            f"match the action '{expected}' you are expecting to score."
        )
