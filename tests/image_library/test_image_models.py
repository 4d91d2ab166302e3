import json

import pytest
from pydantic import ValidationError

from image_library.models.image import Image, NewImageData


def test_new_image_data_serializes_unset_fields_as_null():
    data = NewImageData(user_id=1)
    assert json.loads(data.model_dump_json()) == {"raw_id": None, "sidecar_id": None, "image_id": None, "user_id": 1}


def test_new_image_data_has_no_id():
    assert "id" not in NewImageData.model_fields
    assert "id" not in json.loads(NewImageData(user_id=3).model_dump_json())


@pytest.mark.parametrize(
    "image",
    [
        Image(id=123, user_id=1),
        Image(id=1, raw_id="raw", sidecar_id="side", image_id="img", user_id=2),
        Image(id=-1, raw_id="", sidecar_id=None, image_id="ünïcødé", user_id=0),
    ],
)
def test_image_json_round_trip(image):
    assert Image.model_validate_json(image.model_dump_json()) == image


def test_image_decoding_tolerates_missing_optional_and_unknown_fields():
    image = Image.model_validate_json(b'{"id": 9, "user_id": 4, "created_at": "yesterday"}')
    assert image == Image(id=9, raw_id=None, sidecar_id=None, image_id=None, user_id=4)


@pytest.mark.parametrize(
    "body",
    [
        b'{"user_id": 1}',
        b'{"id": 1}',
        b'{"id": "one", "user_id": 1}',
        b'{"id": 1, "user_id": 1, "raw_id": 5}',
        b'{"id": "123", "user_id": 1}',
        b'{"id": true, "user_id": 1}',
        b'{"id": 5.0, "user_id": "7"}',
        b"null",
        b"{",
    ],
)
def test_image_decoding_rejects_malformed_records(body):
    with pytest.raises(ValidationError):
        Image.model_validate_json(body)
