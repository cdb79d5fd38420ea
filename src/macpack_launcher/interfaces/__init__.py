"""
Interfaces Layer

Callers of the launcher.
"""
