"""Unified chat-completion and embedding client for OpenAI and DeepSeek, configured by JSON model files."""

__version__ = "0.1.0"