"""
HTTP plumbing for the authentication use case.

``HttpPostClient`` and ``HttpResponse`` are the transport-neutral types the
use cases depend on; ``HttpxPostClient`` is the httpx implementation.
"""

from login_form.api.client import HttpxPostClient
from login_form.api.protocols import HttpPostClient, HttpResponse, HttpStatusCode

__all__ = [
    "HttpPostClient",
    "HttpResponse",
    "HttpStatusCode",
    "HttpxPostClient",
]
