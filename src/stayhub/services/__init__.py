"""
stayhub.services

Service-layer package.

Responsibilities:
- Domain logic that spans more than one repository (property creation).
- Pure helpers with no I/O of their own (identifier allocation).
"""

# Package marker.
