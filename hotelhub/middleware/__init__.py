# Middleware package init
"""
HotelHub Backend: Middleware Package
=====================================

Middleware Chain (request direction):
    Request → [Request context] → [GZip] → [CORS] → Route Handler

The request context is outermost so the access line and any error log lines
written while handling the request carry the same request ID.
"""
