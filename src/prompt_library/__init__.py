"""
prompt-library: categorized, keyword-searchable prompts served as tools
"""

__version__ = "1.0.0"

from prompt_library.config import Settings
from prompt_library.main import create_app

__all__ = ["Settings", "create_app", "__version__"]
