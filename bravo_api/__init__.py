"""Bravo sales-force API: activity tracking and daily activity reports.

Layers follow the usual split: ``domain`` entities, ``infrastructure``
(SQLAlchemy, security), ``application`` use cases and ``interfaces.api``
FastAPI routers.
"""
