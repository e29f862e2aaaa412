# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for argloom."""
import logging

logger: logging.Logger = logging.getLogger("argloom")
