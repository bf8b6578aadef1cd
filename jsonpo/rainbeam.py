"""Rainbeam ``{name, version, data}`` files to PO and back.

Rainbeam keys are carried as msgctxt and msgid holds display text. Without
a source file the input itself is treated as source text awaiting its first
translation. With a source file, msgid is the source text and msgstr is
pre-filled from the input.
"""

from __future__ import annotations

from typing import Optional
import logging

from jsonpo.constants import PROJECT_ID_VERSION, RAINBEAM_OUT_NAME, RAINBEAM_OUT_VERSION
from jsonpo.po_model import PoDocument, PoEntry, build_po_document
from jsonpo.schema import RainbeamFile

logger = logging.getLogger(__name__)


def to_po(
    target: RainbeamFile,
    locale: str,
    source: Optional[RainbeamFile] = None,
    *,
    project_id_version: str = PROJECT_ID_VERSION,
) -> PoDocument:
    document = build_po_document(locale, project_id_version=project_id_version)
    # The source decides which keys exist.
    keys_from = source if source is not None else target
    for key, text in keys_from.data.items():
        if source is None:
            entry = PoEntry(msgctxt=key, msgid=text, msgstr=[])
        else:
            translated = target.data.get(key)
            if translated is None:
                logger.debug("No translation for %r, leaving msgstr empty", key)
                translated = ""
            entry = PoEntry(msgctxt=key, msgid=text, msgstr=[translated])
        document.add(entry)
    if source is not None:
        dropped = [key for key in target.data if key not in source.data]
        if dropped:
            logger.debug("Dropped %d keys missing from source: %s", len(dropped), ", ".join(dropped))
    return document


def to_json(document: PoDocument) -> RainbeamFile:
    data: dict[str, str] = {}
    for context, entry in document.entries():
        data[context] = entry.text
    return RainbeamFile(name=RAINBEAM_OUT_NAME, version=RAINBEAM_OUT_VERSION, data=data)


def dump_file(rainbeam_file: RainbeamFile) -> dict:
    return rainbeam_file.model_dump(mode="json")
