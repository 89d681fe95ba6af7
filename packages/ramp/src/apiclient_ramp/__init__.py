"""Async client for the Ramp developer API."""

from apiclient_ramp.client import RampClient

__all__ = ["RampClient"]
