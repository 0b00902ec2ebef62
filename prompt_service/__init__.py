"""Prompt System Pro - file-backed prompt library with LLM generation and chat."""

__version__ = "1.0.0"
