"""Mini README: HTTP interface package for Skysweep.

Provides the FastAPI application factory used by the CLI's ``run``
command. Import from here to avoid deep module paths.
"""

from .web_app import create_application

__all__ = ["create_application"]
