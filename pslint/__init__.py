"""pslint: configurable diagnostic rules for PowerShell scripts."""

__version__ = "0.1.0"
