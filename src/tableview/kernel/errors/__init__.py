"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ViewError                 (view.py)
        ├── InvalidFilterError
        └── InvalidPageRequestError

Configuration errors live in :mod:`tableview.config.validation`.
"""

from tableview.kernel.errors.base import BaseError
from tableview.kernel.errors.view import InvalidFilterError, InvalidPageRequestError, ViewError

__all__ = [
    "BaseError",
    "InvalidFilterError",
    "InvalidPageRequestError",
    "ViewError",
]
