"""WebExtensions ``messages.json`` to PO and back.

Message keys are used verbatim as msgid under the default context. The
translated text sits in msgstr and the message description becomes an
extracted comment (``#.``). Reference translations, typically the source
language, are folded into translator comments (``#``) so a PO editor shows
them next to the string without changing the entry identity.
"""

from __future__ import annotations

from typing import Sequence
import logging

from jsonpo.constants import DEFAULT_CONTEXT, PROJECT_ID_VERSION, REFERENCE_SEPARATOR
from jsonpo.po_model import PoComments, PoDocument, PoEntry, build_po_document
from jsonpo.schema import WebExtMessage, WebExtMessages

logger = logging.getLogger(__name__)


def reference_comment(key: str, references: Sequence[WebExtMessages]) -> str | None:
    texts = [ref[key].message for ref in references if key in ref]
    if not texts:
        return None
    return REFERENCE_SEPARATOR.join(texts)


def to_po(
    messages: WebExtMessages,
    locale: str,
    references: Sequence[WebExtMessages] = (),
    *,
    project_id_version: str = PROJECT_ID_VERSION,
) -> PoDocument:
    document = build_po_document(locale, project_id_version=project_id_version)
    for key, message in messages.items():
        comments = PoComments(
            translator=reference_comment(key, references),
            extracted=message.description,
        )
        if message.placeholders:
            logger.debug("Placeholders of %r are not carried into PO", key)
        document.add(
            PoEntry(
                msgid=key,
                msgstr=[message.message],
                comments=None if comments.is_empty() else comments,
            )
        )
    return document


def to_json(document: PoDocument) -> WebExtMessages:
    result: dict[str, WebExtMessage] = {}
    for _context, entry in document.entries(DEFAULT_CONTEXT):
        description = entry.comments.extracted if entry.comments else None
        result[entry.msgid] = WebExtMessage(message=entry.text, description=description)
    skipped = sum(len(objects) for ctx, objects in document.translations.items() if ctx != DEFAULT_CONTEXT)
    if skipped:
        logger.debug("Ignored %d entries outside the default context", skipped)
    return WebExtMessages(result)


def dump_messages(messages: WebExtMessages) -> dict:
    return messages.model_dump(mode="json", exclude_none=True)
