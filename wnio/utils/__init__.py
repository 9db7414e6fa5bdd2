"""
The wnio.utils package contains helper functions.
"""
from . import logger
