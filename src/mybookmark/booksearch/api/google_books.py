"""Google Books API client, the secondary book catalog."""

from typing import Optional

from pydantic import Field, ValidationError

from .http import CatalogHttp, CatalogUnavailableError
from .models import CatalogModel

VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


class IndustryIdentifier(CatalogModel):
    type: Optional[str] = None
    identifier: Optional[str] = None


class ImageLinks(CatalogModel):
    thumbnail: Optional[str] = None
    smallThumbnail: Optional[str] = None


class VolumeInfo(CatalogModel):
    title: Optional[str] = None
    authors: list[str] = Field(default_factory=list)
    description: Optional[str] = None
    imageLinks: Optional[ImageLinks] = None
    industryIdentifiers: list[IndustryIdentifier] = Field(default_factory=list)

    def identifier(self, id_type: str) -> Optional[str]:
        """Return the first identifier of a type such as ISBN_13."""
        for ident in self.industryIdentifiers:
            if ident.type == id_type and ident.identifier:
                return ident.identifier
        return None


class GoogleVolume(CatalogModel):
    volumeInfo: VolumeInfo = Field(default_factory=VolumeInfo)


class VolumesResponse(CatalogModel):
    totalItems: int = 0
    items: list[GoogleVolume] = Field(default_factory=list)


class GoogleBooksClient:
    """Client for Google Books volumes search."""

    def __init__(self, http: CatalogHttp, api_key: Optional[str] = None):
        self.http = http
        self.api_key = api_key

    async def search_volumes(self, query: str, max_results: int = 8) -> list[GoogleVolume]:
        """Search book volumes.

        Args:
            query: Free-text query
            max_results: Maximum volumes to return

        Returns:
            List of GoogleVolume records (possibly empty)
        """
        params = {
            "q": query,
            "maxResults": max_results,
            "printType": "books",
        }
        if self.api_key:
            params["key"] = self.api_key

        data = await self.http.get_json(VOLUMES_URL, params=params)
        try:
            return VolumesResponse.model_validate(data).items
        except ValidationError as e:
            raise CatalogUnavailableError(f"Malformed Google Books response: {e}")
