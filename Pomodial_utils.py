import math
import os
import sys


def resource_path(relative_path):
    """Absolute path to a bundled asset, works for dev and for PyInstaller builds."""
    base_path = getattr(sys, "_MEIPASS", os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_path, relative_path)


def format_time(seconds):
    # Round up so "00:00" only shows once the countdown has really run out
    whole = max(0, int(math.ceil(seconds)))
    mins, secs = divmod(whole, 60)
    return f"{mins:02d}:{secs:02d}"
