"""
Utility helpers that sit beside the reader.

• Logging colour codes, console setup and per-file progress (`logging.py`).
"""

from .logging import InspectionProgress, setup_logging

__all__ = [
    "InspectionProgress",
    "setup_logging"
]
