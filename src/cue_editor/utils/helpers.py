"""General utility functions"""
import sys


def safe_print(msg):
    """Print with handling for surrogate characters that can't be encoded"""
    try:
        print(msg)
    except UnicodeEncodeError:
        # Replace problematic characters with safe representation
        safe_msg = msg.encode('utf-8', errors='replace').decode('utf-8')
        print(safe_msg)
    sys.stdout.flush()


def format_millis(millis):
    """
    Format a millisecond offset for display.

    Args:
        millis: Offset in milliseconds, negative when unknown

    Returns:
        "M:SS.mmm", or "?" for unknown offsets
    """
    if millis < 0:
        return "?"
    minutes, rest = divmod(millis, 60000)
    seconds, ms = divmod(rest, 1000)
    return f"{minutes}:{seconds:02d}.{ms:03d}"
