"""Schematic engine.

Resolves JSON hyper-schema documents into typed field, composite and
action signatures for generated API clients.
"""

__version__ = "0.1.0"
