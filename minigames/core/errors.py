"""
Exceptions raised by the simulation core and the asset layer
"""


class InvalidConfigError(ValueError):
    """A game configuration is out of range and no session can be built from it."""


class AssetLoadError(RuntimeError):
    """A texture or sound could not be resolved."""
