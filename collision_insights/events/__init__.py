"""
Collision events: storage contract, time-window filtering and statistics.
"""
