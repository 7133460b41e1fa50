"""Image store backed by the GitHub repository contents API."""

import base64
import logging
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from ggdevlog.domain.images import ImageRef
from ggdevlog.errors import UploadError, UploadErrorKind
from ggdevlog.services.images import (
    ImageStore,
    make_image_name,
    raise_for_failed_deletes,
)

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


@dataclass
class GithubImageStore(ImageStore):
    """Stores images as files in a GitHub repository."""

    token: str
    owner: str
    repo: str
    branch: str
    directory: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        token: str,
        owner: str,
        repo: str,
        branch: str,
        directory: str,
        timeout: float = 10.0,
    ) -> "GithubImageStore":
        """Create a store with a managed httpx session."""
        return cls(
            token=token,
            owner=owner,
            repo=repo,
            branch=branch,
            directory=directory,
            http_client=httpx.AsyncClient(
                base_url=GITHUB_API_URL,
                headers={
                    "Authorization": f"token {token}",
                    "Accept": "application/vnd.github+json",
                },
                timeout=timeout,
            ),
        )

    def _content_path(self, name: str) -> str:
        return f"/repos/{self.owner}/{self.repo}/contents/{self.directory}/{name}"

    async def upload(self, data: bytes, original_file_name: str) -> ImageRef:
        """Commit the image to the repository and return its download URL."""
        name = make_image_name(original_file_name)
        try:
            response = await self.http_client.put(
                self._content_path(name),
                json={
                    "message": f"upload image: {name}",
                    "content": base64.b64encode(data).decode("ascii"),
                    "branch": self.branch,
                },
            )
            response.raise_for_status()
            url = response.json()["content"]["download_url"]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.exception("GitHub upload failed", extra={"image_name": name})
            raise UploadError(UploadErrorKind.BACKEND_UNAVAILABLE) from exc
        return ImageRef(name=name, url=url)

    async def delete(self, names: Sequence[str]) -> None:
        """Delete every named file; failures are collected per name.

        Deletions run one at a time because each one is a commit on the same
        branch and concurrent commits are rejected with 409 Conflict.
        """
        failed = [name for name in names if not await self._delete_one(name)]
        raise_for_failed_deletes(names, failed)

    async def _delete_one(self, name: str) -> bool:
        path = self._content_path(name)
        try:
            lookup = await self.http_client.get(path, params={"ref": self.branch})
            if lookup.status_code == httpx.codes.NOT_FOUND:
                logger.info("Image already absent", extra={"image_name": name})
                return True
            lookup.raise_for_status()
            response = await self.http_client.request(
                "DELETE",
                path,
                json={
                    "message": f"delete image: {name}",
                    "sha": lookup.json()["sha"],
                    "branch": self.branch,
                },
            )
            response.raise_for_status()
        except (httpx.HTTPError, KeyError, TypeError, ValueError):
            logger.exception("GitHub delete failed", extra={"image_name": name})
            return False
        return True

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
