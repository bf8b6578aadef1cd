from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
import os
import tempfile

import polib

from jsonpo.constants import (
    CONTENT_TRANSFER_ENCODING,
    CONTENT_TYPE,
    DEFAULT_CONTEXT,
    HEADER_MSGID,
    MIME_VERSION,
    PLURAL_FORMS,
    PO_CHARSET,
    PROJECT_ID_VERSION,
)


@dataclass(frozen=True)
class PoComments:
    translator: str | None = None
    reference: str | None = None
    extracted: str | None = None
    flag: str | None = None
    previous: str | None = None

    def is_empty(self) -> bool:
        return not any(
            (self.translator, self.reference, self.extracted, self.flag, self.previous)
        )


@dataclass(frozen=True)
class PoEntry:
    msgid: str
    msgstr: list[str] = field(default_factory=list)
    msgctxt: str | None = None
    msgid_plural: str | None = None
    comments: PoComments | None = None
    obsolete: bool = False

    @property
    def context(self) -> str:
        return self.msgctxt if self.msgctxt is not None else DEFAULT_CONTEXT

    @property
    def text(self) -> str:
        """Translated text with msgstr segments concatenated."""
        return "".join(self.msgstr)


@dataclass
class PoDocument:
    charset: str
    headers: dict[str, str]
    translations: dict[str, dict[str, PoEntry]] = field(default_factory=dict)

    def add(self, entry: PoEntry) -> None:
        self.translations.setdefault(entry.context, {})[entry.msgid] = entry

    def entries(self, context: str | None = None) -> Iterator[tuple[str, PoEntry]]:
        """Yield (context, entry) pairs, skipping header and obsolete entries.

        With ``context`` set, only entries of that context are yielded.
        """
        if context is None:
            groups = list(self.translations.items())
        else:
            groups = [(context, self.translations.get(context, {}))]
        for ctx, objects in groups:
            for msgid, entry in objects.items():
                if msgid == HEADER_MSGID:
                    continue
                if entry.obsolete:
                    continue
                yield ctx, entry


def fixed_headers(locale: str, *, project_id_version: str = PROJECT_ID_VERSION) -> dict[str, str]:
    return {
        "Project-Id-Version": project_id_version,
        "mime-version": MIME_VERSION,
        "Content-Type": CONTENT_TYPE,
        "Content-Transfer-Encoding": CONTENT_TRANSFER_ENCODING,
        "Plural-Forms": PLURAL_FORMS,
        "Language": locale,
    }


def build_po_document(locale: str, *, project_id_version: str = PROJECT_ID_VERSION) -> PoDocument:
    """Return an empty document carrying the fixed headers for ``locale``."""
    return PoDocument(
        charset=PO_CHARSET,
        headers=fixed_headers(locale, project_id_version=project_id_version),
        translations={DEFAULT_CONTEXT: {}},
    )


def _split_occurrence(text: str) -> tuple[str, str]:
    path, sep, line = text.rpartition(":")
    if sep and line.isdigit():
        return path, line
    return text, ""


def _occurrences_from_reference(reference: str | None) -> list[tuple[str, str]]:
    if not reference:
        return []
    return [_split_occurrence(item) for item in reference.split()]


def _reference_from_occurrences(occurrences: list[tuple[str, str]]) -> str | None:
    parts = [f"{path}:{line}" if line else path for path, line in occurrences]
    return "\n".join(parts) or None


def _flags_from_text(flag: str | None) -> list[str]:
    if not flag:
        return []
    return [item.strip() for item in flag.split(",") if item.strip()]


def _entry_to_polib(entry: PoEntry) -> polib.POEntry:
    comments = entry.comments or PoComments()
    po_entry = polib.POEntry(
        msgid=entry.msgid,
        msgctxt=entry.msgctxt,
        tcomment=comments.translator or "",
        comment=comments.extracted or "",
        occurrences=_occurrences_from_reference(comments.reference),
        flags=_flags_from_text(comments.flag),
        previous_msgid=comments.previous,
        obsolete=entry.obsolete,
    )
    if entry.msgid_plural:
        po_entry.msgid_plural = entry.msgid_plural
        po_entry.msgstr_plural = {index: text for index, text in enumerate(entry.msgstr)}
    else:
        po_entry.msgstr = entry.text
    return po_entry


def _entry_from_polib(po_entry: polib.POEntry) -> PoEntry:
    if po_entry.msgid_plural:
        plural = po_entry.msgstr_plural or {}
        msgstr = [str(plural[key]) for key in sorted(plural, key=int)]
    else:
        msgstr = [po_entry.msgstr or ""]
    comments = PoComments(
        translator=po_entry.tcomment or None,
        reference=_reference_from_occurrences(po_entry.occurrences),
        extracted=po_entry.comment or None,
        flag=", ".join(po_entry.flags) or None,
        previous=po_entry.previous_msgid or None,
    )
    return PoEntry(
        msgid=po_entry.msgid,
        msgstr=msgstr,
        msgctxt=po_entry.msgctxt,
        msgid_plural=po_entry.msgid_plural or None,
        comments=None if comments.is_empty() else comments,
        obsolete=bool(po_entry.obsolete),
    )


def _header_text(headers: dict[str, str]) -> str:
    return "".join(f"{key}: {value}\n" for key, value in headers.items())


def to_pofile(document: PoDocument, *, wrapwidth: int = 0) -> polib.POFile:
    po_file = polib.POFile(wrapwidth=wrapwidth, encoding=document.charset)
    po_file.metadata = dict(document.headers)
    for context, objects in document.translations.items():
        for msgid, entry in objects.items():
            if context == DEFAULT_CONTEXT and msgid == HEADER_MSGID:
                continue
            po_file.append(_entry_to_polib(entry))
    return po_file


def from_pofile(po_file: polib.POFile) -> PoDocument:
    headers = {str(key): str(value) for key, value in po_file.metadata.items()}
    document = PoDocument(
        charset=po_file.encoding or PO_CHARSET,
        headers=headers,
        translations={
            DEFAULT_CONTEXT: {
                HEADER_MSGID: PoEntry(msgid=HEADER_MSGID, msgstr=[_header_text(headers)]),
            }
        },
    )
    for po_entry in po_file:
        entry = _entry_from_polib(po_entry)
        existing = document.translations.get(entry.context, {}).get(entry.msgid)
        if existing is not None and not existing.obsolete and entry.obsolete:
            continue
        document.add(entry)
    return document


def compile_po(document: PoDocument, *, wrapwidth: int = 0) -> str:
    text = str(to_pofile(document, wrapwidth=wrapwidth))
    return text if text.endswith("\n") else text + "\n"


def load_po_from_text(text: str) -> polib.POFile:
    with tempfile.NamedTemporaryFile(suffix=".po", delete=False) as tmp:
        tmp.write(text.encode("utf-8"))
        tmp_path = tmp.name
    try:
        return polib.pofile(tmp_path)
    finally:
        os.unlink(tmp_path)


def parse_po_text(text: str) -> PoDocument:
    return from_pofile(load_po_from_text(text))


def parse_po_path(path: Path) -> PoDocument:
    if not path.exists():
        raise FileNotFoundError(f"PO file not found: {path}")
    return from_pofile(polib.pofile(str(path)))
