"""
PyAudioPlayer Utilities Module

Utility functions and helpers:
- logger: Logging configuration
- timefmt: Duration formatting for time labels
"""
from .logger import logger
from .timefmt import format_duration

__all__ = ['logger', 'format_duration']
