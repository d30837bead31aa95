"""
sigauth.services

Service layer package.

Responsibilities:
- Signature authentication flow and its collaborator interfaces.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on collaborator protocols, never on FastAPI or SQLAlchemy directly.
