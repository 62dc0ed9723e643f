"""
src/assessment/requester.py
============================
Assessment Requester

Responsibility:
    - Send one CreateAssessment request for a client-collected token
    - Reject tokens reported invalid by reCAPTCHA Enterprise
    - Reject tokens whose recorded action differs from the expected action
    - Classify the risk score against a threshold ("Bad" / "Not Bad")
    - Shape the result as {"data": {"score": str, "verdict": str}}

Flow:
    Connect → Send → Validate(valid) → Validate(action) → Classify → Return

This module does NOT:
    - Compute the risk score (reCAPTCHA Enterprise does)
    - Retry failed calls or fall back to a default verdict
    - Manage credentials
"""

import logging
from typing import Any, Optional

import numpy as np
from google.cloud import recaptchaenterprise_v1

from src.assessment.client import ClientFactory, open_client
from src.assessment.errors import ActionMismatchError, InvalidTokenError
from src.assessment.models import (
    AssessmentRequest,
    RiskAnalysis,
    TokenProperties,
    Verdict,
)

logger = logging.getLogger("assessor.assessment.requester")

# Scores below this are "Bad". Can be used to trigger secondary checks
# such as MFA.
DEFAULT_SCORE_THRESHOLD: float = 0.50


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def create_assessment(
    project_id: str,
    site_key: str,
    token: str,
    expected_action: str,
    *,
    threshold: float = DEFAULT_SCORE_THRESHOLD,
    client_factory: Optional[ClientFactory] = None,
) -> dict[str, dict[str, str]]:
    """
    Create an assessment to analyze the risk of a UI action.

    Args:
        project_id:      Google Cloud project ID.
        site_key:        Site key obtained by registering a domain/app.
        token:           Token obtained from the client for ``site_key``.
        expected_action: Action name the token must carry; "" skips the check.
        threshold:       Scores strictly below this are classified "Bad".
        client_factory:  Optional zero-argument client constructor.

    Returns:
        {"data": {"score": "<score>", "verdict": "Bad" | "Not Bad"}}

    Raises:
        ValueError:          If an input is not a string or is blank, or
                             ``threshold`` is outside [0.0, 1.0].
        InvalidTokenError:   If the token is reported invalid.
        ActionMismatchError: If ``expected_action`` is set and does not match.
        Any transport error raised by the client propagates unchanged.
    """
    request = AssessmentRequest(
        project_id=project_id,
        site_key=site_key,
        token=token,
        expected_action=expected_action,
    )
    request.validate()
    threshold = validate_threshold(threshold)

    with open_client(client_factory) as client:
        logger.debug(
            "Creating assessment: project=%s, token=%s…",
            request.project_id, request.token[:8],
        )
        response = client.create_assessment(request=build_request(request))

    token_properties, risk_analysis = parse_response(response)

    if not token_properties.valid:
        logger.warning(
            "Assessment rejected: token invalid (%s).",
            token_properties.invalid_reason,
        )
        raise InvalidTokenError(token_properties.invalid_reason)

    if request.expected_action and token_properties.action != request.expected_action:
        logger.warning(
            "Assessment rejected: action mismatch (expected=%r, actual=%r).",
            request.expected_action, token_properties.action,
        )
        raise ActionMismatchError(request.expected_action, token_properties.action)

    verdict = classify_score(risk_analysis.score, threshold)
    score = format_score(risk_analysis.score)

    logger.info(
        "Assessment complete: action=%s, score=%s, verdict=%s",
        token_properties.action or "-", score, verdict.value,
    )

    return {"data": {"score": score, "verdict": verdict.value}}


def classify_score(score: float, threshold: float = DEFAULT_SCORE_THRESHOLD) -> Verdict:
    """
    Return BAD when ``score < threshold``, NOT_BAD otherwise.

    Both sides are compared at the score's single precision, so a remote
    0.7 against a threshold of 0.7 is NOT_BAD.
    """
    if np.float32(score) < np.float32(threshold):
        return Verdict.BAD
    return Verdict.NOT_BAD


def validate_threshold(threshold: float) -> float:
    """
    Raises:
        ValueError: If ``threshold`` is not a number within [0.0, 1.0].
    """
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(
            f"threshold must be a number, got {type(threshold).__name__}"
        )
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0.0, 1.0], got {threshold}")
    return float(threshold)


def format_score(score: float) -> str:
    """
    Render a remote score as its shortest decimal string.

    Scores arrive as single-precision floats, so 0.9 is stored as
    0.8999999761581421; formatting through float32 gives back "0.9".
    """
    return str(np.float32(score))


# ---------------------------------------------------------------------------
# Request / response mapping
# ---------------------------------------------------------------------------


def build_request(
    request: AssessmentRequest,
) -> recaptchaenterprise_v1.CreateAssessmentRequest:
    """Build the CreateAssessmentRequest for one event."""
    event = recaptchaenterprise_v1.Event(
        site_key=request.site_key,
        token=request.token,
    )
    return recaptchaenterprise_v1.CreateAssessmentRequest(
        parent=f"projects/{request.project_id}",
        assessment=recaptchaenterprise_v1.Assessment(event=event),
    )


def parse_response(response: Any) -> tuple[TokenProperties, RiskAnalysis]:
    """Extract the token and risk sections from an Assessment response."""
    return (
        TokenProperties.from_proto(response.token_properties),
        RiskAnalysis.from_proto(response.risk_analysis),
    )
