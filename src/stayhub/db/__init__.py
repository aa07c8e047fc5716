"""
stayhub.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories and seeding.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers and services only talk to the database through `db.repositories`.
