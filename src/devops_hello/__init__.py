"""
DevOps Hello Service

A fixed-reply HTTP server and a smoke probe that checks it.
"""

from .server import HelloHandler, MESSAGE, PORT, create_server, render_body
from .probe import Probe

__all__ = ['HelloHandler', 'MESSAGE', 'PORT', 'Probe', 'create_server', 'render_body']
