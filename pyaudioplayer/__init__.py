"""PyAudioPlayer - playlist audio player demo built on PyQt6."""

__version__ = "0.1.0"
