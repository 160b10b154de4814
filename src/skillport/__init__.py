"""Symlink skills from a skills repository into the host application's skills directory."""

__version__ = "0.1.0"
