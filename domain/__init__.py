"""Domain layer for the fuel log nutrition core.

Pure business logic: metabolic estimation, nutrition targets and the
food log entry shape, decoupled from any health data platform.
"""
