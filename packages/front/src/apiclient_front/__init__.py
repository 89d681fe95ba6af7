"""Async client for the Front API."""

from apiclient_front.client import FrontClient

__all__ = ["FrontClient"]
