"""Version information for the SimpleDB Python SDK"""

__version__ = "0.1.0"
