"""Fuel log domain: food log entries written to the health data store."""

from .food_log_entry import FoodLogEntry
from .meal_type import MealType

__all__ = ["FoodLogEntry", "MealType"]
