"""
stayhub.api.routers

One router module per resource, plus health and login.
"""
