"""
HTTP server for the practice site.
"""

from practice_site.server.app import create_app, run_site_server

__all__ = [
    "create_app",
    "run_site_server",
]
