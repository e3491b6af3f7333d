"""ASGI middleware for the FastAPI application.

This module provides middleware for:
- CORS headers on every response and preflight handling
- Security headers (X-Request-Id, nosniff, etc.)
"""

from .cors_headers import CORSHeadersMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "CORSHeadersMiddleware",
    "SecurityHeadersMiddleware",
]
