"""
stayhub.auth

Authentication package.

Responsibilities:
- JWT helpers and validation.
- The bearer Authenticator and its FastAPI dependency.
- Password hashing for the login operation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here touches the database; the login route does the user lookup.
