"""Render shell scripts from Jinja2 template files with a per-renderer cache."""

__version__ = "0.1.0"
__all__ = ["renderer"]