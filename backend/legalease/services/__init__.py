from .sanitizer import sanitize_input
from .heuristics import (
    calculate_confidence,
    extract_requirements,
    extract_risks,
    extract_violations,
)
from .session_store import session_store

__all__ = [
    "sanitize_input",
    "calculate_confidence",
    "extract_requirements",
    "extract_risks",
    "extract_violations",
    "session_store",
]
