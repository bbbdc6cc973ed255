#!/usr/bin/env python3
"""
Exceptions raised while setting up a simulation.

Runtime stepping never raises: degenerate geometry is clamped in the force
kernel instead.
"""


class SimulationError(Exception):
    """Base class for all simulator errors."""


class InvalidBodyError(SimulationError, ValueError):
    """A body was constructed with a non-positive mass or non-finite state."""


class ConfigurationError(SimulationError, ValueError):
    """A configuration value is out of range or could not be loaded."""
