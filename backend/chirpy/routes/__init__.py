# Routes package init
"""
Chirpy Backend — API Routes Package
====================================

Route Inventory:
    - health.py:  GET  /api/healthz          (liveness)
    - admin.py:   GET  /admin/metrics        (HTML hit count)
                  GET  /api/metrics          (plain-text hit count)
                  POST /admin/reset          (platform-gated reset)
    - chirps.py:  POST /api/validate_chirp   (validate + censor)
    - users.py:   POST /api/users            (create user)

    - body.py:    JSON body decoding shared by chirps.py and users.py

Static files under /app and /assets are mounted in main.py, not here.

Routes stay THIN: extract input, call a service, pick the status code.
Failures are raised as chirpy.exceptions and formatted by the global
handlers registered in main.py.
"""
