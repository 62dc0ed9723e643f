"""
src/assessment/models.py
=========================
Assessment Data Types

Responsibility:
    - Hold the four caller inputs of one assessment (AssessmentRequest)
    - Hold the two response sections the verdict depends on
      (TokenProperties, RiskAnalysis), decoupled from the protobuf types
    - Define the Verdict labels returned to callers

None of these objects outlive a single create_assessment() call.

This module does NOT:
    - Call reCAPTCHA Enterprise
    - Apply the score threshold (that is requester.py)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Verdict(str, Enum):
    """Binary classification of a remote risk score."""

    BAD = "Bad"
    NOT_BAD = "Not Bad"


@dataclass(frozen=True)
class AssessmentRequest:
    """
    Caller inputs for one assessment.

    Attributes:
        project_id:      Google Cloud project the assessment is created in.
        site_key:        Key registered for the calling site or app.
        token:           Token produced by the client-side reCAPTCHA script.
        expected_action: Action the token should carry; "" skips the check.
    """

    project_id: str
    site_key: str
    token: str
    expected_action: str = ""

    def validate(self) -> None:
        """
        Raises:
            ValueError: If a field is not a string, or a required field is blank.
        """
        for name in ("project_id", "site_key", "token", "expected_action"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(
                    f"{name} must be a string, got {type(value).__name__}"
                )

        for name in ("project_id", "site_key", "token"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")


@dataclass(frozen=True)
class TokenProperties:
    """Token section of an assessment response."""

    valid: bool
    invalid_reason: str
    action: str

    @classmethod
    def from_proto(cls, proto: Any) -> "TokenProperties":
        reason = proto.invalid_reason
        return cls(
            valid=bool(proto.valid),
            invalid_reason=getattr(reason, "name", str(reason)),
            action=proto.action,
        )


@dataclass(frozen=True)
class RiskAnalysis:
    """Risk section of an assessment response."""

    score: float

    @classmethod
    def from_proto(cls, proto: Any) -> "RiskAnalysis":
        return cls(score=float(proto.score))
