# Common utilities and shared modules
"""
Shared components:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import settings, PROJECT_ROOT, DATA_DIR, Settings
from .logging import setup_logging
from .models import MediaFile, MediaType, Product

__all__ = [
    "settings",
    "Settings",
    "PROJECT_ROOT",
    "DATA_DIR",
    "setup_logging",
    "MediaFile",
    "MediaType",
    "Product",
]
