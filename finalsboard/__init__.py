# finalsboard/__init__.py
"""
THE FINALS leaderboard dashboard.

Fetches the public per-platform leaderboards and summarises them:
player count, average cashouts and most common rank tier.
"""

__version__ = "0.3.0"
