"""Kernel types."""
from wooflux.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
