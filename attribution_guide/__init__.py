"""
Core package for the attribution guide application.

Submodules provide static content, widget state, and user interface
rendering helpers that are orchestrated by the top-level `app.py`.
"""
