"""Encoding and decoding of Open Sound Control (OSC) 1.0 messages and bundles."""

__version__ = "0.4.2"