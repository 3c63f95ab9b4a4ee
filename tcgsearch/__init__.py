"""TCG Search - server-rendered card price search over the JustTCG API."""

__version__ = "1.0.0"
