from typing import Optional

from pydantic import BaseModel, ConfigDict


class NewImageData(BaseModel):
    """Payload for creating an image record, the id is assigned by the library service"""

    model_config = ConfigDict(strict=True)

    raw_id: Optional[str] = None
    sidecar_id: Optional[str] = None
    image_id: Optional[str] = None
    user_id: int


class Image(BaseModel):
    """An image record as stored by the library service, field types are never coerced"""

    model_config = ConfigDict(strict=True)

    id: int
    raw_id: Optional[str] = None
    sidecar_id: Optional[str] = None
    image_id: Optional[str] = None
    user_id: int
