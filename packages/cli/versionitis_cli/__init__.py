"""Versionitis CLI - command line front end for versionitis_core."""

__version__ = "0.1.0"
