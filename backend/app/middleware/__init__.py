# Middleware package init
"""
MemoBoard Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID is generated first so the access log line can carry it
    - Request ID is added to response headers on the way out
    - Logging captures response status and duration on the way out
"""
