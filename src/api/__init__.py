# src/api/__init__.py
# =====================
# API Layer — reCAPTCHA Assessor
#
# Responsibility:
#   - Expose POST /api/v1/create-assessment
#   - Map assessment failures to HTTP status codes
