import re

import pytest

from utils import IdentifierPolicy, as_text, extract_identifier, normalize_url


@pytest.mark.parametrize("value, expected", [
    (None, ""),
    ("plain", "plain"),
    (42, "42"),
    (1.5, "1.5"),
    (["a", 1, {"#text": "b"}], "a 1 b"),
    ({"#text": "title", "@lang": "ko"}, "title"),
    ({"__cdata": "cdata title"}, "cdata title"),
    ({"@href": "https://x"}, ""),
    (object(), ""),
])
def test_as_text(value, expected):
    assert as_text(value) == expected


def test_as_text_prefers_text_field_over_cdata():
    assert as_text({"#text": "a", "__cdata": "b"}) == "a"


def test_identifier_from_query_param_is_trimmed():
    url = "https://m.blog.naver.com/PostView.naver?blogId=X&logNo=%20223344%20"
    assert extract_identifier(url) == "223344"


def test_identifier_query_param_wins_over_path():
    assert extract_identifier("https://blog.naver.com/X/223456789?logNo=12") == "12"


def test_identifier_from_numeric_path_segment():
    assert extract_identifier("https://blog.naver.com/X/223456789") == "223456789"
    assert extract_identifier("https://blog.naver.com/X/223456789/") == "223456789"


@pytest.mark.parametrize("url", [
    "https://blog.naver.com/X/12345",          # too short
    "https://blog.naver.com/X/abc123456",
    "https://blog.naver.com/X",
    "https://blog.naver.com/PostView.naver?blogId=X&logNo=",
    "https://blog.naver.com/PostView.naver?blogId=X&logNo=%20%20",
    "not a url",
    "223456789",
    "http://[::1",
    "https://blog.naver.com:notaport/X/223456789",
])
def test_identifier_absent(url):
    assert extract_identifier(url) is None


def test_identifier_policy_is_pluggable():
    policy = IdentifierPolicy(query_param="p", path_pattern=re.compile(r"^[a-z]+-\d+$"))
    assert policy.extract("https://example.com/?p=7") == "7"
    assert policy.extract("https://example.com/posts/hello-12") == "hello-12"
    assert policy.extract("https://example.com/posts/223456789") is None


@pytest.mark.parametrize("url", [
    "https://x/y",
    "https://x/y#frag",
    "https://m.blog.naver.com/PostView.naver?blogId=X&logNo=1#comment",
    "relative/path#frag",
    "",
])
def test_normalize_is_idempotent(url):
    once = normalize_url(url)
    assert normalize_url(once) == once


def test_normalize_strips_fragment():
    assert normalize_url("https://x/y#frag") == normalize_url("https://x/y") == "https://x/y"
    assert normalize_url("https://x/y?a=1#top") == "https://x/y?a=1"


def test_normalize_returns_unparseable_input_unchanged():
    assert normalize_url("not a url#frag") == "not a url#frag"
    assert normalize_url("http://[::1#x") == "http://[::1#x"


def test_extract_parts_matches_extract():
    from utils import NAVER_POLICY, split_url
    url = "https://blog.naver.com/X/223456789?logNo=42"
    assert NAVER_POLICY.extract_parts(split_url(url)) == NAVER_POLICY.extract(url) == "42"
    assert split_url("https://blog.naver.com:nope/X") is None
    assert split_url("/PostView.naver?logNo=1") is None
