"""Pixarch installer (Python-first, step-driven).

Core design goals:
- Sequential, one step at a time
- Preview everything with --dry-run
- Never overwrite a config without a backup
- Recoverable failures are logged and counted, fatal ones abort early
- Centralized logging
"""

__all__ = []
