"""
sigauth.db

Persistence package (SQLAlchemy async) backing the key registry.

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer only sees `services.ports.KeyRegistry`; any document or
# key-value store can replace this package.
