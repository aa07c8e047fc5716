"""
stayhub.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation and per-request timing.
- Optional Sentry error reporting.
"""

# Package marker.
