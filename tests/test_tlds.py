from rec53.tlds import load_tld_list

TIER1 = ["com", "cn", "de", "net", "org", "uk", "ru", "nl"]


def test_load_default_has_thirty():
    result = load_tld_list(None)
    assert len(result) == 30


def test_load_empty_falls_back_to_default():
    assert load_tld_list([]) == load_tld_list(None)


def test_custom_override():
    custom = ["example", "test", "local"]
    assert load_tld_list(custom) == custom


def test_default_contains_tier1():
    result = set(load_tld_list(None))
    assert set(TIER1) <= result


def test_default_tier2_coverage():
    tier2 = [tld for tld in load_tld_list(None) if tld not in TIER1]
    assert len(tier2) >= 22


def test_default_no_duplicates():
    result = load_tld_list(None)
    assert len(set(result)) == len(result)


def test_default_order_starts_with_tier1():
    assert load_tld_list(None)[:8] == TIER1


def test_returned_list_is_independent():
    first = load_tld_list(None)
    first.clear()
    assert len(load_tld_list(None)) == 30