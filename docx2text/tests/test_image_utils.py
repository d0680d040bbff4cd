import base64
from unittest import TestCase

import pytest

from docx2text.extractors.data_types import (
    COMPRESSION_DEFLATED,
    COMPRESSION_STORED,
    ZipEntry,
)
from docx2text.extractors.util.image_utils import (
    content_type_from_filename,
    encode_base64,
    extract_images,
    to_data_uri,
)
from docx2text.extractors.util.limits import DocxParseLimits
from docx2text.tests.zip_fixtures import make_png, raw_deflate

tc = TestCase()

PNG = make_png(4, 4)


def _entry(name: str, data: bytes, method: int = COMPRESSION_STORED) -> ZipEntry:
    return ZipEntry(
        filename=name,
        compression_method=method,
        compressed_data=memoryview(data),
        uncompressed_size=len(data),
    )


def _payload(data_uri: str) -> bytes:
    return base64.b64decode(data_uri.split(",", 1)[1])


def test_content_type_from_filename() -> None:
    tc.assertEqual("image/png", content_type_from_filename("word/media/image1.png"))
    tc.assertEqual("image/jpeg", content_type_from_filename("word/media/photo.JPG"))
    tc.assertEqual("image/jpeg", content_type_from_filename("word/media/a.jpeg"))
    tc.assertEqual("image/gif", content_type_from_filename("word/media/a.gif"))
    tc.assertEqual("image/bmp", content_type_from_filename("word/media/a.bmp"))
    tc.assertEqual("image/tiff", content_type_from_filename("word/media/a.tif"))
    tc.assertEqual("image/tiff", content_type_from_filename("word/media/a.tiff"))
    tc.assertEqual("image/webp", content_type_from_filename("word\\media\\a.webp"))


def test_vector_and_unknown_formats_have_no_content_type() -> None:
    tc.assertIsNone(content_type_from_filename("word/media/image1.emf"))
    tc.assertIsNone(content_type_from_filename("word/media/image1.wmf"))
    tc.assertIsNone(content_type_from_filename("word/media/video.mp4"))
    tc.assertIsNone(content_type_from_filename("word/media/noextension"))
    tc.assertIsNone(content_type_from_filename("word/media.dir/noextension"))


def test_windowed_base64_matches_single_pass_encoding() -> None:
    data = bytes(range(256)) * 100

    tc.assertEqual(base64.b64encode(data).decode("ascii"), encode_base64(data))
    tc.assertEqual(
        base64.b64encode(data[:10]).decode("ascii"), encode_base64(data[:10], window=3)
    )
    tc.assertEqual("", encode_base64(b""))


def test_base64_window_must_be_a_multiple_of_three() -> None:
    with pytest.raises(ValueError):
        encode_base64(b"abcd", window=4)


def test_to_data_uri() -> None:
    tc.assertEqual("data:image/gif;base64,R0lG", to_data_uri("image/gif", b"GIF"))


def test_supported_image_becomes_data_uri() -> None:
    images, failed = extract_images([_entry("word/media/image1.png", PNG)])

    tc.assertEqual(1, len(images))
    assert images[0].startswith("data:image/png;base64,")
    tc.assertEqual(PNG, _payload(images[0]))
    tc.assertEqual([], failed)


def test_deflated_image_is_inflated_before_encoding() -> None:
    entry = _entry("word/media/image1.png", raw_deflate(PNG), COMPRESSION_DEFLATED)

    images, failed = extract_images([entry])

    tc.assertEqual(PNG, _payload(images[0]))
    tc.assertEqual([], failed)


def test_small_payload_is_dropped_silently() -> None:
    images, failed = extract_images([_entry("word/media/image1.png", PNG[:49])])

    tc.assertEqual([], images)
    tc.assertEqual([], failed)


def test_payload_at_the_size_floor_is_kept() -> None:
    images, _ = extract_images([_entry("word/media/image1.png", PNG[:50])])

    tc.assertEqual(1, len(images))


def test_size_floor_is_configurable() -> None:
    images, _ = extract_images(
        [_entry("word/media/tiny.gif", b"GIF89a")],
        DocxParseLimits(min_image_bytes=0),
    )

    tc.assertEqual(["data:image/gif;base64,R0lGODlh"], images)


def test_vector_formats_are_skipped_silently() -> None:
    images, failed = extract_images(
        [
            _entry("word/media/image1.emf", b"\x01" * 200),
            _entry("word/media/image2.wmf", b"\x01" * 200),
        ]
    )

    tc.assertEqual([], images)
    tc.assertEqual([], failed)


def test_unsupported_compression_is_skipped_silently() -> None:
    images, failed = extract_images([_entry("word/media/image1.png", PNG, 14)])

    tc.assertEqual([], images)
    tc.assertEqual([], failed)


def test_corrupt_image_is_reported_not_raised() -> None:
    entries = [
        _entry("word/media/image1.png", b"\xff" * 80, COMPRESSION_DEFLATED),
        _entry("word/media/image2.png", PNG),
    ]

    images, failed = extract_images(entries)

    tc.assertEqual(["word/media/image1.png"], failed)
    tc.assertEqual(1, len(images))


def test_only_media_entries_are_considered() -> None:
    entries = [
        _entry("word/document.xml", PNG),
        _entry("docProps/thumbnail.png", PNG),
        _entry("word/embeddings/image.png", PNG),
        _entry("word\\media\\image1.png", PNG),
    ]

    images, _ = extract_images(entries)

    tc.assertEqual(1, len(images))


def test_mixed_separators_are_not_media() -> None:
    entries = [
        _entry("word\\media/image1.png", PNG),
        _entry("word/media\\image2.png", PNG),
    ]

    images, failed = extract_images(entries)

    tc.assertEqual([], images)
    tc.assertEqual([], failed)


def test_images_follow_entry_order() -> None:
    gif = b"GIF89a" + b"\x00" * 60
    entries = [
        _entry("word/media/image2.gif", gif),
        _entry("word/media/image1.png", PNG),
    ]

    images, _ = extract_images(entries)

    assert images[0].startswith("data:image/gif;base64,")
    assert images[1].startswith("data:image/png;base64,")
