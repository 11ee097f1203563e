# Middleware package init
"""
Shelter Admin Backend — Middleware Package
============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID first, so the access log line and every handler log carry it
    - Access log measures the full handler time and records the final status
"""
