# src/assessment/__init__.py
# ===========================
# reCAPTCHA Enterprise Assessment Layer
#
# Responsibility:
#   - Forward a client-collected token to reCAPTCHA Enterprise
#   - Validate token validity and the expected action
#   - Classify the remote risk score as "Bad" / "Not Bad"
#
# Public API:
#   - create_assessment() — one remote call, returns {"data": {...}}
#   - classify_score()    — threshold a score into a Verdict

from src.assessment.errors import (  # noqa: F401
    AssessmentError,
    InvalidTokenError,
    ActionMismatchError,
)
from src.assessment.models import (  # noqa: F401
    AssessmentRequest,
    TokenProperties,
    RiskAnalysis,
    Verdict,
)
from src.assessment.requester import (  # noqa: F401
    DEFAULT_SCORE_THRESHOLD,
    classify_score,
    create_assessment,
)

__all__ = [
    "AssessmentError",
    "InvalidTokenError",
    "ActionMismatchError",
    "AssessmentRequest",
    "TokenProperties",
    "RiskAnalysis",
    "Verdict",
    "DEFAULT_SCORE_THRESHOLD",
    "classify_score",
    "create_assessment",
]
