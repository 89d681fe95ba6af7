"""Async client for the HubSpot CRM and user provisioning APIs."""

from apiclient_hubspot.client import HubSpotClient

__all__ = ["HubSpotClient"]
