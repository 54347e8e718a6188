"""Result variant type: Success | Failure, and the result() factory."""

from .result import Failure, Outcome, Result, ResultStatus, Success, result

__all__ = ["Result", "Outcome", "Success", "Failure", "ResultStatus", "result"]
