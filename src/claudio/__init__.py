"""claudio: launch Claude Code against local LM Studio models."""

__version__ = "0.1.0"
