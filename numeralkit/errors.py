#!/usr/bin/env python3
"""Exceptions raised by numeralkit."""


class ConfigurationError(ValueError):
    """
    Fatal problem with recipe or settings data.

    Raised for malformed digit labels, missing language populations,
    unknown phoneme symbols and empty phoneme inventories. Never retried.
    """


__all__ = ["ConfigurationError"]
