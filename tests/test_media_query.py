"""Tests for bucket -> CSS media query projection."""

import pytest

from screenbuckets.design import catalog
from screenbuckets.design.buckets import UNBOUNDED, Axis, Boundary, Bucket, create
from screenbuckets.design.media_query import (
    MediaFeature,
    MediaQuery,
    StyleBlock,
    to_media_query,
    with_media,
)


def test_closed_bucket_projects_min_and_max():
    q = to_media_query(create(Axis.WIDTH, Boundary.fixed(512), Boundary.fixed(863)))
    assert q.features == (
        MediaFeature("min-width", 512.0),
        MediaFeature("max-width", 863.0),
    )
    assert q.to_css() == "screen and (min-width: 512px) and (max-width: 863px)"


def test_open_low_bucket_projects_max_only():
    q = to_media_query(create(Axis.WIDTH, UNBOUNDED, Boundary.fixed(511)))
    assert q.features == (MediaFeature("max-width", 511.0),)
    assert q.to_css() == "screen and (max-width: 511px)"


def test_open_high_bucket_projects_min_only():
    q = to_media_query(catalog.TALL)
    assert q.to_css() == "screen and (min-height: 864px)"


def test_fully_unbounded_bucket_degenerates():
    q = to_media_query(Bucket(min=UNBOUNDED, max=UNBOUNDED, axis=Axis.HEIGHT))
    assert q.features == (MediaFeature("max-height", 0.0),)


def test_feature_values_are_floats():
    q = to_media_query(catalog.HANDSET2)
    assert all(isinstance(f.px, float) for f in q.features)


def test_fractional_px_formatting():
    assert MediaFeature("min-width", 511.5).to_css() == "(min-width: 511.5px)"


def test_with_media_single_bucket():
    block = with_media([catalog.HANDSET], ".nav { display: none; }")
    assert isinstance(block, StyleBlock)
    assert block.to_css() == (
        "@media screen and (max-width: 511px) {\n"
        "  .nav { display: none; }\n"
        "}\n"
    )


def test_with_media_multiple_buckets_are_alternatives():
    block = with_media(
        [catalog.HANDSET, catalog.LIMITED],
        [".sidebar { display: none; }", ".title { font-size: 14px; }"],
    )
    assert len(block.queries) == 2
    assert block.to_css() == (
        "@media screen and (max-width: 511px), screen and (max-height: 511px) {\n"
        "  .sidebar { display: none; }\n"
        "  .title { font-size: 14px; }\n"
        "}\n"
    )


def test_with_media_requires_bucket():
    with pytest.raises(ValueError):
        with_media([], ".x { color: red; }")


def test_media_query_custom_type():
    q = MediaQuery(features=(MediaFeature("min-width", 1280.0),), media_type="print")
    assert q.to_css() == "print and (min-width: 1280px)"
