import pytest

from rec53.zones import zone_list


@pytest.mark.parametrize(
    ("domain", "expected"),
    [
        ("example.com.", ["example.com.", "com.", ""]),
        ("www.example.com.", ["www.example.com.", "example.com.", "com.", ""]),
        (
            "a.b.c.example.com.",
            [
                "a.b.c.example.com.",
                "b.c.example.com.",
                "c.example.com.",
                "example.com.",
                "com.",
                "",
            ],
        ),
        (".", [".", ""]),
        ("localhost.", ["localhost.", ""]),
    ],
    ids=["simple", "subdomain", "deep", "root", "single-label"],
)
def test_zone_list(domain, expected):
    assert zone_list(domain) == expected


def test_zone_list_consistency():
    domain = "test.example.com."
    expected = ["test.example.com.", "example.com.", "com.", ""]
    first = zone_list(domain)
    second = zone_list(domain)
    assert first == expected
    assert second == expected


def test_zone_list_non_fqdn_stops_at_last_label():
    assert zone_list("com") == ["com"]


def test_zone_list_non_fqdn_multi_label():
    assert zone_list("example.com") == ["example.com", "com"]


def test_zone_list_empty():
    assert zone_list("") == [""]


def test_zone_list_ends_with_empty_for_fqdn():
    zones = zone_list("mail.corp.example.org.")
    assert zones[-1] == ""
    assert all(zones[i].endswith(zones[i + 1]) for i in range(len(zones) - 1))