import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from image_library.models.client_config import ClientConfig, get_config
from image_library.models.image import Image, NewImageData
from image_library.services.errors import (
    ClientError,
    DecodeError,
    InvalidAddressError,
    TransportError,
    UnexpectedStatusError,
)
from image_library.utils.version import version

IMAGES_PATH = "/images"
DEFAULT_TIMEOUT = 30.0


class LibraryClient:
    """
    Async client for the image library service.
    The http client is owned by the caller and may be shared between concurrent calls, the library client only
    keeps immutable configuration.
    """

    def __init__(self, base_url: str, http: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT):
        self._base_url = base_url.rstrip("/")
        base = _parse_address(self._base_url)
        if base.query or base.fragment:
            raise InvalidAddressError(base_url)
        self._http = http
        self._timeout = timeout
        self._headers = {"Accept": "application/json", "User-Agent": f"image-library-client/{version()}"}

    @classmethod
    def from_config(cls, http: httpx.AsyncClient, config: Optional[ClientConfig] = None) -> "LibraryClient":
        config = config or get_config()
        return cls(config.library_url, http, timeout=config.request_timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def build_target_address(self, path: str) -> httpx.URL:
        return _parse_address(self._base_url + path)

    async def add_image(self, data: NewImageData) -> int:
        """
        Create a new image record
        Args:
            data: The fields of the new record

        Returns: The id the library service assigned to the record

        """
        logging.info("adding a new image to the library")
        try:
            image = await self._exchange("POST", IMAGES_PATH, data)
        except ClientError as exc:
            logging.warning(f"adding image to library failed: {exc}")
            raise
        logging.info(f"image {image.id} added to library")
        return image.id

    async def get_image(self, image_id: int) -> Image:
        logging.info(f"fetching image {image_id} from the library")
        try:
            image = await self._exchange("GET", f"{IMAGES_PATH}/{image_id}")
        except ClientError as exc:
            logging.warning(f"fetching image {image_id} from library failed: {exc}")
            raise
        logging.info(f"image {image.id} fetched from library")
        return image

    async def update_image(self, image: Image) -> int:
        """
        Replace an existing image record
        Args:
            image: The full record, its id selects the record to replace

        Returns: The id of the updated record as reported by the library service

        """
        logging.info(f"updating image {image.id} in the library")
        try:
            updated = await self._exchange("PUT", f"{IMAGES_PATH}/{image.id}", image)
        except ClientError as exc:
            logging.warning(f"updating image {image.id} in library failed: {exc}")
            raise
        logging.info(f"image {updated.id} updated in library")
        return updated.id

    async def _exchange(self, method: str, path: str, payload: Optional[BaseModel] = None) -> Image:
        url = self.build_target_address(path)
        headers = dict(self._headers)
        content = None
        if payload is not None:
            content = payload.model_dump_json()
            headers["Content-Type"] = "application/json"

        try:
            async with self._http.stream(
                method, url, content=content, headers=headers, timeout=self._timeout
            ) as response:
                if response.status_code != httpx.codes.OK:
                    raise UnexpectedStatusError(method, str(url), response.status_code)
                body = await response.aread()
        except httpx.DecodingError as exc:
            raise DecodeError(method, str(url)) from exc
        except httpx.RequestError as exc:
            raise TransportError(method, str(url), str(exc) or type(exc).__name__) from exc

        try:
            return Image.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(method, str(url)) from exc


def _parse_address(address: str) -> httpx.URL:
    try:
        url = httpx.URL(address)
    except httpx.InvalidURL as exc:
        raise InvalidAddressError(address) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidAddressError(address)
    return url
