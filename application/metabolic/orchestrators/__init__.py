"""Metabolic estimation orchestrators."""

from .fuel_log_orchestrator import FuelLogOrchestrator

__all__ = ["FuelLogOrchestrator"]
