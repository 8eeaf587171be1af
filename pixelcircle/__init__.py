"""Count the pixels a circle covers with several partitioning strategies, plus thread greetings, argument parsing, file search and device-report helpers."""

__version__ = "0.1.0"

__all__ = ["cmdline", "devicequery", "filesearch", "gpuarch", "hello", "pixels"]