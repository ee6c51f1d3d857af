"""Cloud region listings."""

from ..types.cloud import CloudList
from .base import ResourceClient


class CloudApi(ResourceClient):
    async def list_all(self) -> CloudList:
        """List every cloud region available to the user."""
        return await self._get("clouds", CloudList)

    async def list_by_project(self, project: str) -> CloudList:
        """List the cloud regions available to a project.

        Args:
            project: Project name.

        Raises:
            ValidationError: If project is empty.
        """
        return await self._get(
            self.path("project/{project}/clouds", project=project), CloudList
        )
