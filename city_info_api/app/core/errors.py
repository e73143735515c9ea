"""
Exceptions raised by the service layer.

Endpoints translate these into HTTP responses: ``NotFoundError``
becomes 404 and ``PatchError`` becomes 400 with the collected errors.
"""

from typing import Any, Dict, List


class NotFoundError(Exception):
    """A city or point of interest does not exist."""


class PatchError(Exception):
    """A patch document could not be applied or produced an invalid model."""

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("; ".join(error["msg"] for error in errors))
        self.errors = errors
