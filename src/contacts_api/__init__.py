"""Contacts REST API.

Users register, log in with a bearer token and manage the contacts they own.
The HTTP layer stays thin: routers validate the request, call a service and
map domain errors onto status codes.
"""

from .main import create_app

__all__ = ["create_app"]
