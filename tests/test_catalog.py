"""Tests for the named bucket catalog."""

import pytest

from screenbuckets.config import settings
from screenbuckets.design import catalog
from screenbuckets.design.buckets import UNBOUNDED, Axis, Boundary, Bucket, in_bucket
from screenbuckets.design.catalog import (
    HEIGHT_TIER,
    WIDTH_BROAD_TIER,
    WIDTH_FINE_TIER,
    HeightClass,
    ScreenClass,
    WidthBroad,
    WidthFine,
    classify,
    classify_height,
    classify_width,
    classify_width_fine,
    get_bucket,
    list_buckets,
    validate_catalog,
)
from screenbuckets.design.metrics import Metrics

TIERS = [WIDTH_FINE_TIER, WIDTH_BROAD_TIER, HEIGHT_TIER]


@pytest.mark.parametrize("tier", TIERS)
def test_tier_partitions_axis(tier):
    # Exactly one bucket matches every value in a dense scan.
    for value in range(0, 2500):
        matches = [tag for tag, bucket in tier if in_bucket(bucket, value)]
        assert len(matches) == 1, (value, matches)


@pytest.mark.parametrize("tier", TIERS)
def test_adjacent_buckets_are_contiguous(tier):
    for (_, a), (_, b) in zip(tier, tier[1:]):
        assert b.min.value is not None
        assert a.max == Boundary.fixed(b.min.value - 1)


@pytest.mark.parametrize("tier", TIERS)
def test_tier_extremes_unbounded(tier):
    assert tier[0][1].min == UNBOUNDED
    assert tier[-1][1].max == UNBOUNDED
    assert in_bucket(tier[0][1], 0)
    assert in_bucket(tier[-1][1], 100000)


def test_published_fine_width_table():
    values = [0, 351, 352, 383, 384, 511, 512]
    expected = [
        WidthFine.HANDSET1,
        WidthFine.HANDSET1,
        WidthFine.HANDSET2,
        WidthFine.HANDSET2,
        WidthFine.HANDSET3,
        WidthFine.HANDSET3,
        WidthFine.PORTABLE1,
    ]
    assert [classify_width_fine(v) for v in values] == expected


def test_fine_classification_monotonic():
    order = [tag for tag, _ in WIDTH_FINE_TIER]
    last = 0
    for value in range(0, 3000, 7):
        idx = order.index(classify_width_fine(value))
        assert idx >= last
        last = idx
    assert last == len(order) - 1


def test_fine_boundaries_match_settings():
    mins = [bucket.min.value for _, bucket in WIDTH_FINE_TIER[1:]]
    assert tuple(mins) == settings.WIDTH_FINE_BREAKPOINTS
    assert catalog.PORTABLE1.min == Boundary.fixed(512)
    assert catalog.PORTABLE1.max == Boundary.fixed(863)
    assert catalog.WIDE2.min == Boundary.fixed(1920)


def test_broad_buckets_encompass_fine():
    assert catalog.HANDSET.min == catalog.HANDSET1.min
    assert catalog.HANDSET.max == catalog.HANDSET3.max
    assert catalog.PORTABLE.min == catalog.PORTABLE1.min
    assert catalog.PORTABLE.max == catalog.PORTABLE3.max
    assert catalog.WIDE.min == catalog.WIDE1.min
    assert catalog.WIDE.max == catalog.WIDE2.max


def test_broad_classification():
    assert classify_width(0) is WidthBroad.HANDSET
    assert classify_width(511) is WidthBroad.HANDSET
    assert classify_width(512) is WidthBroad.PORTABLE
    assert classify_width(1279) is WidthBroad.PORTABLE
    assert classify_width(1280) is WidthBroad.WIDE


def test_height_reuses_width_numbers():
    assert catalog.LIMITED.max == catalog.HANDSET3.max
    assert catalog.MEDIUM.min == catalog.PORTABLE1.min
    assert catalog.MEDIUM.max == catalog.PORTABLE1.max
    assert catalog.TALL.min == catalog.PORTABLE2.min
    assert all(b.axis is Axis.HEIGHT for _, b in HEIGHT_TIER)
    assert classify_height(511) is HeightClass.LIMITED
    assert classify_height(512) is HeightClass.MEDIUM
    assert classify_height(864) is HeightClass.TALL


def test_classify_metrics():
    sc = classify(Metrics(width=400, height=900))
    assert sc == ScreenClass(
        width=WidthBroad.HANDSET,
        width_fine=WidthFine.HANDSET3,
        height=HeightClass.TALL,
    )


def test_registry_lookup():
    names = [name for name, _ in list_buckets()]
    assert names[:3] == ["handset", "portable", "wide"]
    assert "portable2" in names
    assert names[-3:] == ["limited", "medium", "tall"]
    assert get_bucket("wide1") is catalog.WIDE1


def test_unknown_bucket_raises():
    with pytest.raises(KeyError):
        get_bucket("phablet")


def test_validate_catalog_passes():
    validate_catalog()


def test_validate_catalog_detects_gap(monkeypatch):
    broken = list(WIDTH_FINE_TIER)
    tag, bucket = broken[2]
    broken[2] = (tag, Bucket(min=Boundary.fixed(400), max=bucket.max, axis=bucket.axis))
    monkeypatch.setattr(catalog, "WIDTH_FINE_TIER", tuple(broken))
    with pytest.raises(catalog.CatalogIntegrityError):
        validate_catalog()


def test_build_tier_rejects_wrong_table_length():
    with pytest.raises(catalog.CatalogIntegrityError):
        catalog._build_tier(Axis.HEIGHT, HeightClass, (512,))
