"""
Collision Insights: storage and statistics for road-collision detection events.
"""
__version__ = "0.1.0"
