"""Helpers for OGG media tools: header fields, MP3 frames, chapter files, options and DVD chapter lists."""

__version__ = "0.1.0"