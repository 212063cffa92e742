# Services package init
"""
Chirpy Backend — Services Layer
================================

What:  Business logic between routes (HTTP) and database (persistence).

Service Inventory:
    - censor:           Masks forbidden whole-word tokens (pure function)
    - chirp_service:    Validates chirp payloads and applies the censor
    - hit_counter:      Lock-protected static-file hit counter
    - user_repository:  Insert / bulk-delete of User rows

Services never touch HTTP objects. They return values or raise exceptions
from chirpy.exceptions; routes and global handlers pick the status code.
"""
