import pytest

from cwget.errors import SchemaError
from cwget.models import PageInfo
from cwget.parsers import parse_page_manifest
from helpers import manuscript


def test_every_entry_becomes_a_page_in_order():
    document = {
        "manuscripts": [
            manuscript(2, "https://x/2.webp", "xor", "00ff"),
            manuscript(1, "https://x/1.jpg"),
        ]
    }

    assert parse_page_manifest(document) == [
        PageInfo(drm_mode="xor", drm_hash="00ff", image_url="https://x/2.webp", page=2),
        PageInfo(drm_mode="none", drm_hash=None, image_url="https://x/1.jpg", page=1),
    ]


def test_missing_hash_is_none():
    entry = manuscript(1, "https://x/1.jpg")
    del entry["drmHash"]

    assert parse_page_manifest({"manuscripts": [entry]})[0].drm_hash is None


def test_empty_manifest():
    assert parse_page_manifest({"manuscripts": []}) == []


def test_missing_manuscripts():
    with pytest.raises(SchemaError, match=r"\$\.manuscripts"):
        parse_page_manifest({})


@pytest.mark.parametrize("page", [0, -1, "1", 1.0, True])
def test_page_must_be_a_positive_integer(page):
    entry = manuscript(1, "https://x/1.jpg")
    entry["page"] = page

    with pytest.raises(SchemaError):
        parse_page_manifest({"manuscripts": [entry]})


def test_entry_must_be_an_object():
    with pytest.raises(SchemaError, match=r"manuscripts\[0\]"):
        parse_page_manifest({"manuscripts": [None]})


def test_missing_image_url():
    entry = manuscript(1, "https://x/1.jpg")
    del entry["drmImageUrl"]

    with pytest.raises(SchemaError, match="drmImageUrl"):
        parse_page_manifest({"manuscripts": [entry]})
