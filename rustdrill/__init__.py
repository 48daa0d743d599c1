"""Terminal status lines, rust-analyzer project files and worked reference drills."""

__version__ = "0.1.0"