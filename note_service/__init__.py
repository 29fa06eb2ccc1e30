"""
ClipNotes v1 - Note Service

Turns clipboard links into notes.
"""

__version__ = "1.0.0"
