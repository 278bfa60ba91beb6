# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argwise."""
import logging

logger: logging.Logger = logging.getLogger("argwise")
