"""
Version 1 API endpoints.
"""

from prompt_library.api.v1.tools import router as tools_router

__all__ = ["tools_router"]
