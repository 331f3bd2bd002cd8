"""Core logic for algo orders: models, indicators, algos and the host.

This package contains pure business logic with no network or database
access. Order submission and market data are attached by the application
(app/) through the host's event bus.
"""
