"""
main.py
========
Central entry point for the reCAPTCHA Assessor service.

Run with:
    uvicorn main:app --reload
"""

import logging

from dotenv import load_dotenv

load_dotenv()  # Load .env before any module reads env vars

# Configure logging for the entire application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Keep Google client / transport logs out of the assessment output.
for _client_logger_name in (
    "google",
    "google.auth",
    "google.api_core",
    "grpc",
    "urllib3",
):
    logging.getLogger(_client_logger_name).setLevel(logging.WARNING)

from src.api.assess import app  # noqa: F401, E402

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
