from app.api import (
    ats_routes,
    enhance_routes,
)

__all__ = [
    "ats_routes",
    "enhance_routes",
]
