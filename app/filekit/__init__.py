"""filekit - synchronous filesystem toolkit with an observable trace channel."""

__version__ = "0.1.0"
