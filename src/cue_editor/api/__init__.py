"""HTTP edit service"""

from .server import create_server, start_server

__all__ = ["create_server", "start_server"]
