"""
Endless Runner
--------------
Side-scrolling runner built on pygame: jump and dodge enemies that run in
from the right; every enemy that leaves the screen scores a point.
"""

__version__ = "1.0.0"
