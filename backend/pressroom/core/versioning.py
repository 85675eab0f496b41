"""Edit Merging: pure computation of a proposed Version from a partial edit.

Invariants:
    - Omitted, empty or whitespace-only fields fall back to the live value
    - title and language are stored stripped; body is kept verbatim when non-blank
    - images keep their order; an empty list counts as "not supplied"
    - Functions are pure and never touch the live Article
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EditableFields:
    """Snapshot of an Article's editable content."""
    title: str
    body: str
    language: str
    images: list[str] = field(default_factory=list)


def merge_edit(
    current: EditableFields,
    title: str | None = None,
    body: str | None = None,
    language: str | None = None,
    images: list[str] | None = None,
) -> EditableFields:
    """Take each supplied non-blank value, else keep the current one."""
    return EditableFields(
        title=(title or "").strip() or current.title,
        body=body if body and body.strip() else current.body,
        language=(language or "").strip() or current.language,
        images=list(images) if images else list(current.images),
    )


def language_changed(current_language: str, requested: str | None) -> bool:
    requested = (requested or "").strip()
    return bool(requested) and requested != current_language
