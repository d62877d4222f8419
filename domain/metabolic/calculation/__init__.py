"""Calculation services for metabolic estimation."""

from .bmr_service import MIN_BMR, BMRService
from .targets_service import TargetsService
from .tdee_service import TDEEService

__all__ = [
    "MIN_BMR",
    "BMRService",
    "TDEEService",
    "TargetsService",
]
