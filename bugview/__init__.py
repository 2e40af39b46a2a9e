"""Core package for Bugview, the public read-only view onto Jira."""
__version__ = "0.1.0"
