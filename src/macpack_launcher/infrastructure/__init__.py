"""
Infrastructure Layer

Adapters for process execution, configuration, logging and bundle
metadata.
"""
