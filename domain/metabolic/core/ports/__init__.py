"""Ports for metabolic estimation domain."""

from .calculators import IBMRCalculator, ITDEECalculator
from .health_data_store import IHealthDataStore

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IHealthDataStore",
]
