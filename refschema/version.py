"""
Version information for refschema.
"""

__version__ = "1.0.0"
