"""Seedprep - secret payload encoding and generation for SeedKeeper cards"""

__version__ = "1.0.0"
