# advisor/errors.py
from typing import Sequence


class ValidationError(ValueError):
    """One or more hardware fields were left empty."""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = tuple(missing_fields)
        super().__init__("Please fill in all fields to check compatibility.")


class RemoteUnavailable(RuntimeError):
    """The remote evaluator failed; callers recover with the local rules."""
