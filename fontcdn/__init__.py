"""
Font CDN engine - deterministic font delivery estimates over HTTP.
"""

__version__ = "0.1.0"
