"""Transcription service for uploaded videos."""

__version__ = "0.1.0"
