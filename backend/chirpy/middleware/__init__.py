# Middleware package init
"""
Chirpy Backend — Middleware Package
====================================

Middleware Chain (app-wide):
    Request → [Request ID] → [Logging] → Route Handler

Mounted-app middleware:
    /app/* → [HitCounterMiddleware] → StaticFiles

    The hit counter wraps only the static-file app, not the JSON API, so
    API calls and admin pages never change the count.
"""
