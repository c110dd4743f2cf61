"""EventHub: capacity-safe event store and catalog query engine."""

__version__ = '1.0.0'
