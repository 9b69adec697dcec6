"""Tests for the HTML renderer.

The rendered markup is parsed back with BeautifulSoup to check that the
job title and every ordered item list survive rendering unchanged.
"""

from __future__ import annotations

import copy
from typing import Dict, List

import pytest  # type: ignore
from bs4 import BeautifulSoup

from jobblueprint.errors import ApiError, MalformedJsonError
from jobblueprint.render import render, render_error, render_message, render_page
from jobblueprint.schema import SECTIONS, Blueprint


def _read_table(markup: str) -> Blueprint:
    """Recover a Blueprint from rendered table markup."""
    soup = BeautifulSoup(markup, "html.parser")
    table = soup.find("table")
    title = table.find("th").get_text()
    sections: Dict[str, List[str]] = {}
    for row in table.find_all("tr", attrs={"data-section": True}):
        sections[row["data-section"]] = [
            span.get_text() for span in row.select("li > span.item-text")
        ]
    return Blueprint(
        job_title=title,
        responsibilities=sections["responsibilities"],
        required_skills=sections["requiredSkills"],
        qualifications=sections["qualifications"],
    )


BLUEPRINTS = [
    Blueprint("Data Analyst", ["Analyze data"], ["SQL"], ["BSc"]),
    Blueprint("Intern", [], [], []),
    Blueprint(
        "R&D <Lead> \"Principal\"",
        ["Own the <roadmap> & budget", "Ship 'v2'", "Ship 'v2'"],
        ["C++", "Résumé reading", "日本語"],
        ["PhD or equivalent", "  padded item  "],
    ),
    Blueprint("Template Author", ["Write {{ templates }} and {% blocks %}"], ["Jinja2"], []),
]


@pytest.mark.parametrize("blueprint", BLUEPRINTS, ids=lambda b: b.job_title)
def test_render_round_trip(blueprint: Blueprint) -> None:
    assert _read_table(render(blueprint)) == blueprint


@pytest.mark.parametrize("blueprint", BLUEPRINTS, ids=lambda b: b.job_title)
def test_render_does_not_mutate(blueprint: Blueprint) -> None:
    before = copy.deepcopy(blueprint)
    render(blueprint, {("responsibilities", 0)})
    assert blueprint == before


def test_table_layout(data_analyst: Blueprint) -> None:
    soup = BeautifulSoup(render(data_analyst), "html.parser")
    rows = soup.find("table").find_all("tr", recursive=False)
    assert len(rows) == 1 + len(SECTIONS)
    header = rows[0].find("th")
    assert header["colspan"] == "2"
    assert header.get_text() == "Data Analyst"
    labels = [row.find("strong").get_text() for row in rows[1:]]
    assert labels == ["Responsibilities", "Required Skills", "Qualifications"]


def test_each_item_has_two_feedback_buttons(data_analyst: Blueprint) -> None:
    soup = BeautifulSoup(render(data_analyst, feedback_url="/fb"), "html.parser")
    for li in soup.find_all("li"):
        form = li.find("form")
        assert form["action"] == "/fb"
        values = sorted(button["value"] for button in form.find_all("button"))
        assert values == ["false", "true"]
    skills_item = soup.select_one('tr[data-section="requiredSkills"] li')
    assert skills_item.find("input", attrs={"name": "section"})["value"] == "requiredSkills"
    assert skills_item.find("input", attrs={"name": "index"})["value"] == "0"


def test_acknowledged_items_are_de_emphasized() -> None:
    blueprint = Blueprint("QA Engineer", ["Test", "Report"], ["Python"], [])
    soup = BeautifulSoup(render(blueprint, {("responsibilities", 1)}), "html.parser")
    items = soup.select('tr[data-section="responsibilities"] li')
    assert all("feedback-given" not in b["class"] for b in items[0].find_all("button"))
    assert all("feedback-given" in b["class"] for b in items[1].find_all("button"))


def test_item_markup_is_escaped() -> None:
    blueprint = Blueprint("X", ["<script>alert(1)</script>"], [], [])
    markup = render(blueprint)
    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup


def test_render_error_shows_raw_response_for_malformed_json() -> None:
    raw = "Sorry <b>no</b> JSON today"
    soup = BeautifulSoup(render_error(MalformedJsonError("No valid JSON found", raw)), "html.parser")
    assert soup.find("p").get_text().startswith("Error generating blueprint: No valid JSON found")
    assert soup.find("pre").get_text() == raw


def test_render_error_without_raw_text() -> None:
    soup = BeautifulSoup(render_error(ApiError("HTTP error! status: 500")), "html.parser")
    assert soup.find("pre") is None
    assert "status: 500" in soup.get_text()


def test_render_page_download_link_visibility(data_analyst: Blueprint) -> None:
    hidden = BeautifulSoup(render_page(output_html=render_message("Please enter a job title.")), "html.parser")
    assert hidden.find(id="download-btn") is None
    assert hidden.find(id="blueprint-output").get_text(strip=True) == "Please enter a job title."

    shown = BeautifulSoup(
        render_page(job_title="Data Analyst", output_html=render(data_analyst), show_download=True),
        "html.parser",
    )
    assert shown.find(id="download-btn")["href"] == "/download"
    assert shown.find(id="job-title")["value"] == "Data Analyst"
    assert shown.select_one("#blueprint-output table") is not None
