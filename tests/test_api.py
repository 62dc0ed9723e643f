"""
tests/test_api.py
==================
API Layer Tests — POST /api/v1/create-assessment

Tests verify:
    1. Successful assessments return {"data": {...}} with status 200
    2. Configured project, site key, and threshold are passed through
    3. Assessment failures map to 400 with an error_msg payload
    4. Remote and configuration failures map to 502 / 500

All tests are OFFLINE — create_assessment is mocked.
"""

import os
import sys
import unittest
from unittest.mock import patch

# Ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fastapi.testclient import TestClient
from google.api_core.exceptions import ServiceUnavailable

from src.api.assess import app
from src.assessment import ActionMismatchError, InvalidTokenError

_ENV = {
    "GOOGLE_CLOUD_PROJECT": "my-project",
    "RECAPTCHA_SITE_KEY": "site-key-123",
    "RECAPTCHA_SCORE_THRESHOLD": "0.7",
}

_BODY = {"recaptcha_cred": {"token": "token-abc", "action": "login"}}


@patch.dict(os.environ, _ENV)
class TestCreateAssessmentEndpoint(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    @patch("src.api.assess.create_assessment")
    def test_success(self, mock_assess):
        mock_assess.return_value = {"data": {"score": "0.9", "verdict": "Not Bad"}}
        resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"data": {"score": "0.9", "verdict": "Not Bad"}})
        mock_assess.assert_called_once_with(
            "my-project", "site-key-123", "token-abc", "login", threshold=0.7,
        )

    @patch("src.api.assess.create_assessment")
    def test_action_defaults_to_empty(self, mock_assess):
        mock_assess.return_value = {"data": {"score": "0.1", "verdict": "Bad"}}
        resp = self.client.post(
            "/api/v1/create-assessment",
            json={"recaptcha_cred": {"token": "token-abc"}},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(mock_assess.call_args.args[3], "")

    @patch("src.api.assess.create_assessment")
    def test_invalid_token_is_400(self, mock_assess):
        mock_assess.side_effect = InvalidTokenError("EXPIRED")
        resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("EXPIRED", resp.json()["data"]["error_msg"])

    @patch("src.api.assess.create_assessment")
    def test_action_mismatch_is_400(self, mock_assess):
        mock_assess.side_effect = ActionMismatchError("login", "signup")
        resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("does not match", resp.json()["data"]["error_msg"])

    @patch("src.api.assess.create_assessment")
    def test_bad_input_is_422(self, mock_assess):
        mock_assess.side_effect = ValueError("token must not be empty")
        resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 422)

    @patch("src.api.assess.create_assessment")
    def test_remote_failure_is_502(self, mock_assess):
        mock_assess.side_effect = ServiceUnavailable("backend down")
        resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 502)

    def test_missing_token_field_is_422(self):
        resp = self.client.post(
            "/api/v1/create-assessment", json={"recaptcha_cred": {"action": "login"}}
        )
        self.assertEqual(resp.status_code, 422)

    @patch("src.api.assess.create_assessment")
    def test_missing_site_key_is_500(self, mock_assess):
        with patch.dict(os.environ, {"RECAPTCHA_SITE_KEY": ""}):
            resp = self.client.post("/api/v1/create-assessment", json=_BODY)
        self.assertEqual(resp.status_code, 500)
        mock_assess.assert_not_called()

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.json(), {"status": "ok"})


if __name__ == "__main__":
    unittest.main()
