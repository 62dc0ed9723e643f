"""
src/assessment/client.py
=========================
reCAPTCHA Enterprise Client Scope

Responsibility:
    - Create a RecaptchaEnterpriseServiceClient for one assessment
    - Scope the client with its own context manager, which releases the
      transport on every exit path

Credentials are resolved by the Google Cloud client itself (Application
Default Credentials). Creation failures propagate unchanged.

This module does NOT:
    - Build assessment requests
    - Retry, back off, or override client timeouts
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from google.cloud import recaptchaenterprise_v1

logger = logging.getLogger("assessor.assessment.client")

ClientFactory = Callable[[], Any]


@contextmanager
def open_client(client_factory: Optional[ClientFactory] = None) -> Iterator[Any]:
    """
    Yield a reCAPTCHA Enterprise client inside the client's own ``with`` scope.

    The client closes its transport when the scope exits, on every path.

    Args:
        client_factory: Zero-argument callable returning a client. Defaults
                        to ``RecaptchaEnterpriseServiceClient``.

    Yields:
        The client instance.
    """
    factory = client_factory or recaptchaenterprise_v1.RecaptchaEnterpriseServiceClient
    with factory() as client:
        logger.debug("reCAPTCHA Enterprise client opened.")
        yield client
    logger.debug("reCAPTCHA Enterprise client closed.")
