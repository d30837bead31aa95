"""
sigauth.token_issuers

Token issuer package.

Responsibilities:
- Provide `TokenIssuer` implementations (local JWT signing, remote HTTP issuance).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The handler depends on the `services.ports.TokenIssuer` boundary, not on these classes.
