"""Utility helpers."""

from .env import setup_logging

__all__ = ['setup_logging']
