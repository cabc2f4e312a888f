from datetime import datetime, timezone

from app.dashboard.normalize import normalize_ad, parse_created_at, sort_ads


def test_missing_fields_get_sentinels():
    ad = normalize_ad({"id": "a1", "description": "hello"})
    assert ad.video_link == "N/A"
    assert ad.image_link == "N/A"
    assert ad.URL == "N/A"
    assert ad.CTA == "N/A"
    assert ad.Start_Date == "N/A"
    assert ad.created_at == "N/A"
    assert ad.tag == "other"


def test_falsy_fields_get_sentinels():
    ad = normalize_ad(
        {
            "id": "a2",
            "description": "x",
            "video_link": "",
            "image_link": None,
            "URL": "",
            "CTA": None,
            "Start_Date": "",
            "tag": "",
            "created_at": None,
        }
    )
    assert (ad.video_link, ad.image_link, ad.URL, ad.CTA) == ("N/A",) * 4
    assert ad.tag == "other"
    assert ad.created_at == "N/A"


def test_present_fields_are_kept(make_row):
    raw = make_row(3)
    ad = normalize_ad(raw)
    assert ad.id == "ad-3"
    assert ad.CTA == "Shop Now"
    assert ad.URL == raw["URL"]
    assert ad.created_at == raw["created_at"]


def test_id_is_kept_as_string_and_description_defaults_empty():
    ad = normalize_ad({"id": 42, "description": None})
    assert ad.id == "42"
    assert ad.description == ""


def test_parse_created_at_variants():
    assert parse_created_at("N/A") is None
    assert parse_created_at("") is None
    assert parse_created_at("yesterday") is None
    z = parse_created_at("2024-06-01T12:00:00Z")
    offset = parse_created_at("2024-06-01T12:00:00+00:00")
    assert z == offset == datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
    assert parse_created_at("2024-06-01").tzinfo is not None


def test_sort_newest_first_with_unparseable_last(make_row):
    ads = [
        normalize_ad(make_row(5)),
        normalize_ad(make_row(9, created_at=None, id="no-date-1")),
        normalize_ad(make_row(1)),
        normalize_ad(make_row(7, created_at="garbage", id="no-date-2")),
        normalize_ad(make_row(3)),
    ]
    ordered = [ad.id for ad in sort_ads(ads)]
    assert ordered == ["ad-1", "ad-3", "ad-5", "no-date-1", "no-date-2"]


def test_sort_is_non_increasing(make_rows):
    rows = list(reversed(make_rows(30)))
    ads = sort_ads([normalize_ad(r) for r in rows])
    stamps = [parse_created_at(ad.created_at) for ad in ads]
    assert all(a >= b for a, b in zip(stamps, stamps[1:]))
