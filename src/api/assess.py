"""
src/api/assess.py
==================
API Assessment Endpoint

Responsibility:
    - Expose POST /api/v1/create-assessment
    - Accept {"recaptcha_cred": {"token": ..., "action": ...}} from the web front-end
    - Delegate to src.assessment.create_assessment with configured project,
      site key, and score threshold
    - Return {"data": {"score": ..., "verdict": ...}}

Error mapping:
    InvalidTokenError / ActionMismatchError → 400 {"data": {"error_msg": ...}}
    ValueError (bad input)                  → 422
    Missing / invalid configuration         → 500
    GoogleAPICallError (remote failure)     → 502
"""

import asyncio
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from google.api_core.exceptions import GoogleAPICallError
from pydantic import BaseModel

from src.assessment import AssessmentError, create_assessment
from src.config import get_settings

logger = logging.getLogger("assessor.api")


class RecaptchaCredential(BaseModel):
    token: str
    action: str = ""


class AssessmentBody(BaseModel):
    recaptcha_cred: RecaptchaCredential


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="reCAPTCHA Assessor",
    description="Server-side reCAPTCHA Enterprise assessment endpoint.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/v1/create-assessment")
async def assess(body: AssessmentBody):
    """
    Score a client-collected reCAPTCHA token.

    Returns:
        {"data": {"score": str, "verdict": "Bad" | "Not Bad"}}
    """
    try:
        settings = get_settings()
        settings.require_remote()
    except (RuntimeError, ValueError) as exc:
        logger.error("Assessment misconfigured: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc))

    cred = body.recaptcha_cred
    logger.info("Assessment requested: action=%s", cred.action or "-")

    try:
        result = await asyncio.to_thread(
            create_assessment,
            settings.project_id,
            settings.site_key,
            cred.token,
            cred.action,
            threshold=settings.score_threshold,
        )
    except AssessmentError as exc:
        return JSONResponse(status_code=400, content={"data": {"error_msg": str(exc)}})
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except GoogleAPICallError as exc:
        logger.error("reCAPTCHA Enterprise call failed: %s", exc)
        raise HTTPException(status_code=502, detail=f"Assessment service error: {exc}")
    except Exception as exc:
        logger.error("Assessment unexpected error: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Assessment failed: {exc}")

    return JSONResponse(status_code=200, content=result)
