"""Metabolic estimation domain (BMR, TDEE, nutrition targets)."""
