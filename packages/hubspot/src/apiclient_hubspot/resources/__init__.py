"""HubSpot resource accessors."""

from apiclient_hubspot.resources.crm_objects import MAX_BATCH_SIZE, ContactObjects, CrmObjects
from apiclient_hubspot.resources.users import Users

__all__ = ["MAX_BATCH_SIZE", "ContactObjects", "CrmObjects", "Users"]
