"""
Presentation layer: HTTP API consumed by the dashboard panels.
"""
