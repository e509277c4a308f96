"""Single-page site server, HTML pages, and orbit-camera cube scene data."""

__version__ = "0.2.1"