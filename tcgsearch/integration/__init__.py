"""Upstream API integrations."""

from tcgsearch.integration.justtcg_client import JustTCGClient

__all__ = ["JustTCGClient"]
