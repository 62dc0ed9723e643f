"""
src/config.py
==============
Runtime Settings

Responsibility:
    - Load .env (python-dotenv) and read assessment settings from the environment
    - Validate the score threshold

Environment variables:
    GOOGLE_CLOUD_PROJECT       Project the assessment is created in
    RECAPTCHA_SITE_KEY         Site key sent with each event
    RECAPTCHA_SCORE_THRESHOLD  Boundary between "Bad" and "Not Bad" (default 0.50)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.assessment.requester import DEFAULT_SCORE_THRESHOLD, validate_threshold

load_dotenv()

logger = logging.getLogger("assessor.config")


@dataclass(frozen=True)
class Settings:
    project_id: Optional[str]
    site_key: Optional[str]
    score_threshold: float = DEFAULT_SCORE_THRESHOLD

    def require_remote(self) -> None:
        """
        Raises:
            RuntimeError: If the project or site key is not configured.
        """
        if not self.project_id:
            raise RuntimeError("GOOGLE_CLOUD_PROJECT environment variable is not set.")
        if not self.site_key:
            raise RuntimeError("RECAPTCHA_SITE_KEY environment variable is not set.")


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Raises:
        ValueError: If RECAPTCHA_SCORE_THRESHOLD is not a number in [0.0, 1.0].
    """
    return Settings(
        project_id=os.environ.get("GOOGLE_CLOUD_PROJECT") or None,
        site_key=os.environ.get("RECAPTCHA_SITE_KEY") or None,
        score_threshold=_parse_threshold(os.environ.get("RECAPTCHA_SCORE_THRESHOLD")),
    )


def _parse_threshold(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_SCORE_THRESHOLD

    try:
        threshold = float(raw)
    except ValueError as exc:
        raise ValueError(
            f"RECAPTCHA_SCORE_THRESHOLD must be a number, got {raw!r}"
        ) from exc

    try:
        threshold = validate_threshold(threshold)
    except ValueError as exc:
        raise ValueError(f"RECAPTCHA_SCORE_THRESHOLD: {exc}") from exc

    logger.debug("Score threshold overridden: %.2f", threshold)
    return threshold
