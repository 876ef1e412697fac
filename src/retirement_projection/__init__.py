"""
Retirement projection service: a deterministic year-by-year financial
projection engine with a FastAPI front end.
"""

from .config import API_VERSION as __version__
from .models import DataRow, Inputs
from .projection import project

__all__ = ["DataRow", "Inputs", "project", "__version__"]
