"""Unit tests for document -> payload normalization."""

import pytest

from makemehired.schemas.resume_document import new_document
from makemehired.services.document_editor import set_scalar
from makemehired.services.payload_normalizer import clean, normalize, split_skills


@pytest.mark.unit
def test_skills_split_trimmed_in_order():
    assert split_skills("Go, Rust,  Python ") == ["Go", "Rust", "Python"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (" , ,, ", []),
        ("SQL,sql,SQL", ["SQL", "sql", "SQL"]),
        ("Machine Learning ,  Data Viz", ["Machine Learning", "Data Viz"]),
        ("C++,,C#", ["C++", "C#"]),
    ],
)
def test_split_skills_edge_cases(text, expected):
    result = split_skills(text)
    assert result == expected
    assert all(s and s.strip() == s for s in result)


@pytest.mark.unit
def test_clean_drops_blank_achievements():
    assert clean(["Led team", "", "   "]) == ["Led team"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "items",
    [
        [],
        [""],
        ["  a ", "b", "\t", "  c"],
        ["x", "x", " x "],
    ],
)
def test_clean_is_idempotent(items):
    once = clean(items)
    assert clean(once) == once


@pytest.mark.unit
def test_optional_fields_become_null_when_blank(filled_document):
    doc = set_scalar(filled_document, "linkedin", "")
    doc = set_scalar(doc, "summary", "")
    payload = normalize(doc)
    assert payload.linkedin is None
    assert payload.summary is None
    assert payload.model_dump(mode="json")["linkedin"] is None


@pytest.mark.unit
def test_optional_fields_pass_through_untrimmed(filled_document):
    doc = set_scalar(filled_document, "linkedin", "https://x")
    doc = set_scalar(doc, "summary", "  Spaced summary ")
    payload = normalize(doc)
    assert payload.linkedin == "https://x"
    assert payload.summary == "  Spaced summary "


@pytest.mark.unit
def test_normalize_filled_document(filled_document):
    payload = normalize(filled_document)

    assert payload.full_name == "Ada Lovelace"
    assert payload.job_title_target == "Software Engineer"
    assert payload.skills == ["Go", "Rust", "Python"]
    assert [e.achievements for e in payload.experience] == [["Led team"], ["Wrote notes"]]
    assert payload.experience[0].company == "Babbage & Co"
    assert payload.experience[0].duration == "1842 - 1843"
    assert payload.education[0].institution == "Private tutoring"
    assert payload.certifications == ["AWS SAA"]
    assert payload.projects == ["Note G"]
    assert payload.languages == ["English", "French"]
    assert payload.interests == []
    assert payload.template == "modern"


@pytest.mark.unit
def test_normalize_keeps_blank_entries_with_cleaned_achievements():
    payload = normalize(new_document())
    assert len(payload.experience) == 1
    assert payload.experience[0].model_dump() == {"company": "", "role": "", "duration": "", "achievements": []}
    assert payload.education[0].model_dump() == {"degree": "", "institution": "", "year": ""}
    assert payload.skills == []


@pytest.mark.unit
def test_normalize_does_not_touch_document(filled_document):
    before = filled_document.model_copy(deep=True)
    normalize(filled_document)
    assert filled_document == before


@pytest.mark.unit
def test_wire_body_has_expected_keys(filled_document):
    body = normalize(filled_document).model_dump(mode="json")
    assert set(body) == {
        "full_name", "email", "phone", "linkedin", "summary", "job_title_target", "skills",
        "experience", "education", "certifications", "projects", "languages", "interests", "template",
    }
    assert body["experience"][0]["achievements"] == ["Led team"]
