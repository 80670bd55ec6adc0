import re
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

INDEX_HTML = Path(__file__).resolve().parents[3] / "public" / "index.html"


@pytest.fixture(scope="module")
def soup() -> BeautifulSoup:
    return BeautifulSoup(INDEX_HTML.read_text(encoding="utf-8"), "html.parser")


@pytest.fixture(scope="module")
def style_text(soup) -> str:
    return "\n".join(style.get_text() for style in soup.find_all("style"))


def _control_for(soup: BeautifulSoup, label_text: str):
    label = soup.find("label", string=label_text)
    assert label is not None, f"missing label {label_text!r}"
    return soup.find(id=label["for"])


def test_form_contains_labeled_controls_in_order(soup):
    form = soup.select_one("#searchForm")
    assert form is not None
    assert "searchBar" in form["class"]

    controls = [_control_for(soup, text) for text in ("Location", "Tenure", "Type", "Min size", "Max size")]
    assert all(control is not None for control in controls)
    assert all(form in control.parents for control in controls)

    submit = form.find("button", string="Search")
    assert submit is not None
    assert submit.get("type") == "submit"
    assert not submit.has_attr("disabled")

    order = [el.get("id") or el.get_text() for el in form.find_all(["input", "select", "button"])]
    assert order == ["location", "tenure", "type", "minSize", "maxSize", "Search"]


def test_tenure_options_match_record_flags(soup):
    values = [option["value"] for option in soup.select("#tenure option")]
    assert values == ["", "to_let", "for_sale"]


def test_mobile_layout_is_stacked_grid(style_text):
    base = style_text.split("@media")[0]
    form_rule = re.search(r"#searchForm\s*\{([^}]*)\}", base)
    assert form_rule is not None
    assert re.search(r"display:\s*grid", form_rule.group(1))
    assert re.search(r"grid-template-columns:\s*1fr", form_rule.group(1))
    assert re.search(
        r'grid-template-areas:\s*"location"\s*"tenure"\s*"type"\s*"min"\s*"max"\s*"submit"', form_rule.group(1)
    )

    assert re.search(r"#searchForm input,\s*#searchForm select\s*\{[^}]*width:\s*100%", base)
    assert re.search(r"#searchForm \.field\s*\{[^}]*position:\s*static", base)


def test_desktop_layout_declares_six_named_columns(style_text):
    assert re.search(r"@media\s*\(min-width:\s*1024px\)", style_text)
    desktop = style_text.split("@media", 1)[1]
    assert re.search(r"grid-template-columns:\s*repeat\(6", desktop)
    assert re.search(r'grid-template-areas:\s*"location tenure type min max submit"', desktop)


def test_page_loads_generated_properties(soup):
    script = "\n".join(tag.get_text() for tag in soup.find_all("script"))
    assert 'fetch("properties.json")' in script
