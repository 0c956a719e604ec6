"""
Video Assistant Backend

Extracts video metadata and mirror links from rendered pages, keeps the
result current across in-page navigation, and serves it to the extension UI.
"""

__version__ = "1.0.0"
