"""Front attachment downloads."""

from __future__ import annotations

from apiclient_shared import Resource


class Attachments(Resource):
    async def download(self, attachment_link_id: str) -> bytes:
        """Download the raw content of an attachment."""
        return await self.client.request(
            "GET",
            "download/{attachment_link_id}",
            bytes,
            path_params={"attachment_link_id": attachment_link_id},
        )
