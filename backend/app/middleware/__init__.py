# Middleware package init
"""
City Info Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID: correlation ID for logging and tracing (X-Request-ID)
    - Logging: method, path, status and duration, tagged with the request ID
"""
