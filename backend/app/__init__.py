"""Algo host application (configuration and wiring)."""
