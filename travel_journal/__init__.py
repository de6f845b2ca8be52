"""
Travel Journal - local record store for visited places, bucket list, trips
and their preparation checklists.
"""

__version__ = "1.0.0"
