"""jardoc: structural analysis of decompiled Java classes."""

__version__ = "0.1.0"
