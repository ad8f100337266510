"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import time


class ConvertUtils:
    @staticmethod
    def format_bytes(size_bytes: int) -> str:
        """
        Convert bytes to a human-readable string with 1024-based units.
        Rounded to two decimals, trailing zeros dropped (e.g., 1.5 KB, 1.95 MB).
        """
        if size_bytes <= 0:
            return "0 Bytes"

        units = ["Bytes", "KB", "MB", "GB", "TB"]
        value = float(size_bytes)
        index = 0
        while value >= 1024 and index < len(units) - 1:
            value /= 1024
            index += 1

        text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
        return f"{text} {units[index]}"

    @staticmethod
    def timestamp_to_human(timestamp: float, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
        """
        Convert a Unix timestamp to a human-readable string.
        Uses local time by default.
        """
        try:
            return time.strftime(fmt, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            return "Invalid timestamp"


def format_bytes(size_bytes: int) -> str:
    return ConvertUtils.format_bytes(size_bytes)
