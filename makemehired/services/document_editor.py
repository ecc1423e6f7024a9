"""
Pure update operations on ResumeDocument snapshots.

Every function takes the current snapshot and returns a new one. Nothing is
mutated in place: each level on the path from the document root to the
edited leaf (document, entry, achievements tuple) is rebuilt, and every
element off that path is shared unchanged with the previous snapshot.
Elements are never removed or reordered.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple, Union

from makemehired.config import REQUIRED_FIELDS
from makemehired.schemas.resume_document import EducationEntry, ExperienceEntry, ResumeDocument
from makemehired.schemas.sections import (
    ENTRY_FIELDS,
    EntrySection,
    ListSection,
    ScalarField,
)

Section = Union[EntrySection, ListSection]

# Element type and empty default appended by the "+ Add" buttons
_ENTRY_TYPES = {
    EntrySection.EXPERIENCE: ExperienceEntry,
    EntrySection.EDUCATION: EducationEntry,
}


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string value, got {type(value).__name__}")
    return value


def _check_index(items: Tuple[Any, ...], index: int, where: str) -> None:
    """Raise IndexError unless 0 <= index < len(items); negative indices are rejected."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{where} index must be an int, got {type(index).__name__}")
    if not 0 <= index < len(items):
        raise IndexError(f"{where} index {index} out of range (length {len(items)})")


def _replace_at(items: Tuple[Any, ...], index: int, value: Any) -> Tuple[Any, ...]:
    return items[:index] + (value,) + items[index + 1:]


def _resolve_section(section: Union[Section, str]) -> Section:
    """Coerce a section name to EntrySection or ListSection; unknown names raise ValueError."""
    if isinstance(section, (EntrySection, ListSection)):
        return section
    for kind in (EntrySection, ListSection):
        try:
            return kind(section)
        except ValueError:
            continue
    raise ValueError(f"Unknown section: {section!r}")


def set_scalar(doc: ResumeDocument, field: Union[ScalarField, str], value: str) -> ResumeDocument:
    """Replace one top-level scalar field."""
    field = ScalarField(field)
    return doc.model_copy(update={field.value: _require_str(value)})


def set_entry_field(
    doc: ResumeDocument,
    section: Union[EntrySection, str],
    index: int,
    field: str,
    value: str,
) -> ResumeDocument:
    """Replace one scalar field of experience[index] or education[index]."""
    section = EntrySection(section)
    field = ENTRY_FIELDS[section](field)
    value = _require_str(value)
    entries = getattr(doc, section.value)
    _check_index(entries, index, section.value)
    updated = entries[index].model_copy(update={field.value: value})
    return doc.model_copy(update={section.value: _replace_at(entries, index, updated)})


def set_list_element(
    doc: ResumeDocument,
    section: Union[ListSection, str],
    index: int,
    value: str,
) -> ResumeDocument:
    """Replace the string at index in certifications, projects, languages or interests."""
    section = ListSection(section)
    value = _require_str(value)
    items = getattr(doc, section.value)
    _check_index(items, index, section.value)
    return doc.model_copy(update={section.value: _replace_at(items, index, value)})


def set_achievement(doc: ResumeDocument, exp_index: int, ach_index: int, value: str) -> ResumeDocument:
    """Replace experience[exp_index].achievements[ach_index]."""
    value = _require_str(value)
    entries = doc.experience
    _check_index(entries, exp_index, "experience")
    entry = entries[exp_index]
    _check_index(entry.achievements, ach_index, "achievements")
    achievements = _replace_at(entry.achievements, ach_index, value)
    updated = entry.model_copy(update={"achievements": achievements})
    return doc.model_copy(update={"experience": _replace_at(entries, exp_index, updated)})


def _coerce_template(section: Section, template: Any) -> Any:
    if isinstance(section, ListSection):
        return _require_str("" if template is None else template)
    entry_type = _ENTRY_TYPES[section]
    if template is None:
        return entry_type()
    if isinstance(template, entry_type):
        return template
    if isinstance(template, Mapping):
        return entry_type.model_validate(dict(template))
    raise TypeError(f"{section.value} template must be {entry_type.__name__}, got {type(template).__name__}")


def append_entry(
    doc: ResumeDocument,
    section: Union[Section, str],
    template: Optional[Any] = None,
) -> ResumeDocument:
    """
    Append template to the end of a section. Without a template the section's
    empty default is appended (blank entry, or "" for plain list sections).
    """
    section = _resolve_section(section)
    element = _coerce_template(section, template)
    items = getattr(doc, section.value)
    return doc.model_copy(update={section.value: items + (element,)})


def append_achievement(doc: ResumeDocument, exp_index: int) -> ResumeDocument:
    """Append an empty achievement to experience[exp_index]; other entries are shared as-is."""
    entries = doc.experience
    _check_index(entries, exp_index, "experience")
    entry = entries[exp_index]
    updated = entry.model_copy(update={"achievements": entry.achievements + ("",)})
    return doc.model_copy(update={"experience": _replace_at(entries, exp_index, updated)})


def missing_required_fields(doc: ResumeDocument) -> List[str]:
    """Required top-level fields that are blank after trimming, in form order."""
    return [name for name in REQUIRED_FIELDS if not getattr(doc, name).strip()]
