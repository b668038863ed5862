# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Decli."""
import logging

logger: logging.Logger = logging.getLogger("decli")
