"""
Clipboard output with delayed auto-clear.
"""

import logging
import threading
import time

import pyperclip

logger = logging.getLogger(__name__)

CLEAR_AFTER_SECONDS = 60


def clear_clipboard_after(seconds: int) -> None:
    """
    Block for ``seconds`` and then empty the clipboard.

    Args:
        seconds: Delay before clearing
    """
    time.sleep(seconds)
    try:
        pyperclip.copy("")
    except pyperclip.PyperclipException as e:
        # Don't print anything as user might be doing other things
        logger.debug(f"Could not clear clipboard: {e}")


def copy_to_clipboard(value: str, clear_after: int = CLEAR_AFTER_SECONDS) -> bool:
    """
    Copy a value to the clipboard and clear it again after a delay.

    The clear runs on a daemon thread, so it only happens if the calling
    process is still alive; short-lived callers should pass ``clear_after=0``
    and call ``clear_clipboard_after`` themselves.

    Args:
        value: Text to copy
        clear_after: Seconds before clearing (0 disables clearing)

    Returns:
        True if the value was copied, False if no clipboard is available
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Could not copy to clipboard: {e}")
        return False

    if clear_after > 0:
        clear_thread = threading.Thread(target=clear_clipboard_after, args=(clear_after,),
                                        daemon=True)
        clear_thread.start()

    return True
