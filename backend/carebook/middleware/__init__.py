# Middleware package init
"""
CareBook Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation ID for logging and the X-Request-ID header
    2. Logging: access line with status and duration, tagged with the ID
    3. GZip / CORS: Starlette's stock middleware
"""
