import pytest

from settings import OG_IMAGE, SITE_URL
from seo.meta_tags import build_meta_tags, generate_meta_tags_html, replace_meta_tags_in_html
from seo.route_map import ROUTE_SEO_MAP, normalize_route

ROOT_TITLE = ROUTE_SEO_MAP["/"].title


def _page(head: str, head_open: str = "<head>") -> str:
    return f"<!DOCTYPE html>\n<html lang=\"en\">{head_open}{head}\n</head><body><h1>Hi</h1></body></html>"


# ================================================================
# Route normalization
# ================================================================

@pytest.mark.parametrize("raw,expected", [
    ("/", "/"),
    ("//", "/"),
    ("/about/", "/about"),
    ("/blog/how-to-break-100///", "/blog/how-to-break-100"),
    ("/faq", "/faq"),
])
def test_normalize_route(raw, expected):
    assert normalize_route(raw) == expected


# ================================================================
# generate_meta_tags_html
# ================================================================

def test_root_route_resolves_with_or_without_trailing_slash():
    html = generate_meta_tags_html("/")
    assert html.startswith(f"<title>{ROOT_TITLE}</title>")
    assert generate_meta_tags_html("//") == html
    assert generate_meta_tags_html("/about/") == generate_meta_tags_html("/about")


def test_unknown_route_generates_nothing():
    assert generate_meta_tags_html("/nonexistent-route") == ""
    assert build_meta_tags("/nonexistent-route") == []


def test_tag_order_and_defaults():
    tags = build_meta_tags("/")
    seo = ROUTE_SEO_MAP["/"]

    assert tags == [
        f"<title>{seo.title}</title>",
        f'<meta name="description" content="{seo.description}">',
        f'<link rel="canonical" href="{SITE_URL}/">',
        f'<meta property="og:title" content="{seo.title}">',
        f'<meta property="og:description" content="{seo.description}">',
        f'<meta property="og:url" content="{SITE_URL}/">',
        '<meta property="og:type" content="website">',
        f'<meta property="og:image" content="{OG_IMAGE}">',
        f'<meta property="og:image:alt" content="{seo.title}">',
        '<meta name="twitter:card" content="summary_large_image">',
        f'<meta name="twitter:title" content="{seo.title}">',
        f'<meta name="twitter:description" content="{seo.description}">',
        f'<meta name="twitter:image" content="{OG_IMAGE}">',
        f'<meta name="twitter:image:alt" content="{seo.title}">',
        f'<meta name="keywords" content="{seo.keywords}">',
    ]


def test_keywords_tag_only_when_present():
    assert ROUTE_SEO_MAP["/demo"].keywords is None
    tags = build_meta_tags("/demo")
    assert len(tags) == 14
    assert not any('name="keywords"' in t for t in tags)


def test_article_routes_and_canonical_path():
    html = generate_meta_tags_html("/guides/golf-handicap-calculator/")
    assert '<meta property="og:type" content="article">' in html
    assert f'<link rel="canonical" href="{SITE_URL}/guides/golf-handicap-calculator">' in html


def test_tags_joined_with_indented_newlines():
    assert "\n    <meta name=\"description\"" in generate_meta_tags_html("/faq")


# ================================================================
# replace_meta_tags_in_html
# ================================================================

def test_strips_tags_with_scrambled_attribute_order():
    page = _page(
        '\n  <meta charset="utf-8">'
        '\n  <title data-rh="true">foo</title>'
        '\n  <meta content="bar" name="description">'
        '\n  <meta data-rh="true" content="old" property="og:title" />'
        "\n  <meta content='old card' name='twitter:card'>"
        '\n  <link href="https://old.example/" rel="canonical">'
        '\n  <meta property="article:modified_time" content="2024-01-01">'
        '\n  <meta name="viewport" content="width=device-width">',
        head_open='<head data-app="ssg">',
    )
    result = replace_meta_tags_in_html("/", page)

    assert "foo" not in result
    assert 'content="bar"' not in result
    assert 'content="old"' not in result
    assert "old card" not in result
    assert "old.example" not in result
    assert "article:modified_time" not in result
    # unmanaged tags survive
    assert '<meta charset="utf-8">' in result
    assert '<meta name="viewport" content="width=device-width">' in result
    # one generated block, right after the opening head tag
    assert result.count("<title>") == 1
    assert result.count('rel="canonical"') == 1
    assert f'<head data-app="ssg">\n    <title>{ROOT_TITLE}</title>' in result


def test_case_insensitive_matching():
    page = _page('\n  <TITLE>Old</TITLE>\n  <META NAME="Description" CONTENT="old">')
    result = replace_meta_tags_in_html("/faq", page)
    assert "Old" not in result
    assert 'CONTENT="old"' not in result


def test_unmapped_route_returns_html_unchanged():
    page = _page("\n  <title>keep me</title>")
    assert replace_meta_tags_in_html("/nonexistent-route", page) == page


def test_missing_head_is_silent_noop_for_insertion():
    page = "<html><body><p>no head here</p></body></html>"
    result = replace_meta_tags_in_html("/", page)
    assert result == page
    assert "<title>" not in result


def test_header_element_is_not_mistaken_for_head():
    page = "<html><head></head><body><header>Nav</header></body></html>"
    result = replace_meta_tags_in_html("/about", page)
    assert result.index("<title>") < result.index("</head>")
    assert "<header>Nav</header>" in result
    assert result.count("<title>") == 1


def test_replace_is_idempotent():
    page = _page('\n  <meta charset="utf-8">\n  <title>foo</title>\n  <meta name="description" content="bar">')
    once = replace_meta_tags_in_html("/blog", page)
    twice = replace_meta_tags_in_html("/blog", once)
    assert twice == once
    assert twice.count("<title>") == 1


def test_replace_switches_routes_cleanly():
    about = replace_meta_tags_in_html("/about", _page(""))
    faq = replace_meta_tags_in_html("/faq", about)
    assert ROUTE_SEO_MAP["/about"].title not in faq
    assert faq.count('property="og:url"') == 1
