"""
nolintlint - checks that suppression directives are well-formed, specific and explained.
"""

__version__ = "0.1.0"
