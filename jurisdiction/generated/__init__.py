"""Modules in this package are written by ``jurisdiction-compile``."""
