"""
sigauth.auth

Authentication primitives package.

Responsibilities:
- Domain types for key records and session credentials.
- Signature verification against registered public keys.
- JWT session-token issuing and validation helpers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here performs I/O; collaborators live in `db` and `token_issuers`.
