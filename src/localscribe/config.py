"""
Application configuration.

Edit these settings to configure logging, downloads and recognition.
"""

import logging

APP_NAME = "LocalScribe"

# =============================================================================
# DEVELOPMENT SETTINGS - Edit these for local development
# =============================================================================
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_TO_CONSOLE = False  # Set to True to output logs to terminal
# =============================================================================

# =============================================================================
# MODEL SETTINGS
# =============================================================================
DOWNLOAD_TIMEOUT_SECONDS = 30  # Connect/read timeout of the HTTP client
# =============================================================================

# =============================================================================
# RECOGNITION SETTINGS
# =============================================================================
WHISPER_SAMPLE_RATE = 16000  # whisper.cpp only accepts 16 kHz mono input
RECOGNITION_THREADS = 4
# =============================================================================


def get_log_level() -> int:
    """Get the logging level as an integer."""
    return getattr(logging, LOG_LEVEL.upper(), logging.INFO)
