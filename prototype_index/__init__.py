"""
Prototype Index Generator

Writes a self-contained landing page that links to every deployed prototype,
one card per prototype slug.
"""

__version__ = "0.1.0"
