# Middleware package init
"""
Layered API — Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    The request id is set first so the access log line (written on the
    way back out) and any controller log lines carry it.
"""
