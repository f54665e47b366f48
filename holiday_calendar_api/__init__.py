"""
Top‑level package for the Holiday Calendar API.

Makes ``holiday_calendar_api`` importable so that modules under ``app``
can be referenced with fully qualified names such as
``holiday_calendar_api.app.main``.  The HTTP client for the service
lives in :mod:`holiday_calendar_api.client`.
"""

__all__ = []
