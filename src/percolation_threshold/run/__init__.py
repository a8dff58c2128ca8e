"""Run configuration for threshold sweeps."""

from .manifest import RunConfig

__all__ = ['RunConfig']
