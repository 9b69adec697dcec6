"""Tests for the Word document exporter.

Exported bytes are opened again with python-docx to check headings and
paragraph order.
"""

from __future__ import annotations

import io
from pathlib import Path

import docx  # type: ignore
import pytest  # type: ignore

from jobblueprint.errors import NoBlueprintError
from jobblueprint.export import document_filename, export_as_document, export_current, save_document
from jobblueprint.schema import Blueprint
from jobblueprint.state import BlueprintState


def _paragraphs(data: bytes):
    document = docx.Document(io.BytesIO(data))
    return [(p.style.name, p.text) for p in document.paragraphs]


def test_document_structure() -> None:
    blueprint = Blueprint(
        "Data Analyst",
        ["Analyze data", "Build dashboards"],
        ["SQL", "Python"],
        ["BSc"],
    )
    assert _paragraphs(export_as_document(blueprint)) == [
        ("Heading 1", "Data Analyst"),
        ("Heading 2", "Responsibilities:"),
        ("Normal", "Analyze data"),
        ("Normal", "Build dashboards"),
        ("Heading 2", "Required Skills:"),
        ("Normal", "SQL"),
        ("Normal", "Python"),
        ("Heading 2", "Qualifications:"),
        ("Normal", "BSc"),
    ]


def test_empty_sections_keep_headings() -> None:
    paragraphs = _paragraphs(export_as_document(Blueprint("Intern", [], [], [])))
    assert [text for _, text in paragraphs] == [
        "Intern",
        "Responsibilities:",
        "Required Skills:",
        "Qualifications:",
    ]


def test_no_blueprint_raises() -> None:
    with pytest.raises(NoBlueprintError):
        export_as_document(None)
    with pytest.raises(NoBlueprintError):
        export_current(BlueprintState())


def test_filename(data_analyst: Blueprint) -> None:
    assert document_filename(data_analyst) == "Data Analyst Blueprint.docx"


def test_save_document(tmp_path: Path, data_analyst: Blueprint) -> None:
    path = save_document(data_analyst, str(tmp_path / "out"))
    assert Path(path).name == "Data Analyst Blueprint.docx"
    assert _paragraphs(Path(path).read_bytes())[0] == ("Heading 1", "Data Analyst")


@pytest.mark.parametrize(
    "title, expected",
    [
        ("AI/ML Engineer", "AI-ML Engineer Blueprint.docx"),
        ("../../escape", "..-..-escape Blueprint.docx"),
    ],
)
def test_save_document_title_with_separators(tmp_path: Path, title: str, expected: str) -> None:
    out = tmp_path / "out"
    blueprint = Blueprint(title, ["Train"], [], [])
    path = Path(save_document(blueprint, str(out)))
    assert path.name == expected
    assert path.parent == out
    assert [p.name for p in out.iterdir()] == [expected]
    assert _paragraphs(path.read_bytes())[0] == ("Heading 1", title)
    assert document_filename(blueprint) == f"{title} Blueprint.docx"
