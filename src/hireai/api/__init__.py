# HTTP 入口（FastAPI）

from .app import app

__all__ = ["app"]
