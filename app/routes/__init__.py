#app/routes/__init__.py

from .server import router as server_router
from .client import router as client_router
