"""
Configuration Module.

This module defines the configuration structure controlling the defaults of a
[`BodyBuilder`][querybody.builders.BodyBuilder].
"""

from dataclasses import dataclass

from ..enum import Dialect


@dataclass
class BuilderConfig:
    """
    Default settings of a [`BodyBuilder`][querybody.builders.BodyBuilder].

    Passed to the [`bodybuilder()`][querybody.builders.bodybuilder] factory;
    when omitted every field keeps its default.
    """

    dialect: Dialect = Dialect.Default
    """
    The output shape produced by `build()` when it is called without a dialect.
    """

    sort_direction: str = "asc"
    """
    The direction used by `sort()` when it is called without one.
    """
