"""Global logging and error handling utilities"""
import logging
import sys

from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

logger = logging.getLogger(__name__)

_main_window = None

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report a programming/IO error and re-raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Logs the message and raises (full traceback in the console)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows a popup if a main window has been registered
        - Then raises the exception
    """
    message = user_message if user_message else str(e)
    if DEBUG_MODE:
        logger.error("%s: %s", title, message)
        raise e

    logger.error("%s: %s", title, message, exc_info=e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        logger.error("ERROR POPUP (no window): %s - %s", title, message)

    # Re-raise so the caller can decide how to recover
    raise e
