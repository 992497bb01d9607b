"""Document (de)serialization and the load-or-default policy.

Schema of the stored bytes (UTF-8 JSON):

    {
        "requests": [
            {
                "name": "Request 1",
                "url": "https://example.com",
                "method": "GET",
                "headers": [["Content-Type", "application/json"]],
                "body": ""
            }
        ],
        "environments": [{"name": "Default", "values": [["HOST", "localhost"]]}],
        "selected_panel": {"Request": 0}
    }

Unknown or missing fields, and documents that break the model's invariants,
are rejected as a whole.  On load such a document is replaced by the
built-in default rather than patched up.
"""

import logging

from pydantic import ValidationError

from requestie.document import Document, default_document
from requestie.storage import DocumentStore

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when stored bytes cannot be turned back into a Document."""


def serialize_document(document: Document) -> bytes:
    return document.model_dump_json(by_alias=True).encode("utf-8")


def deserialize_document(data: bytes) -> Document:
    """Parse stored bytes into a Document.

    Raises DocumentError if the bytes are not valid JSON, do not match the
    schema, or describe an inconsistent document.  Parsing is strict: an
    index must be a JSON integer and every text field a JSON string.
    """
    try:
        return Document.model_validate_json(data, strict=True)
    except ValidationError as exc:
        raise DocumentError(f"stored document is invalid: {exc}") from exc


def load_document(store: DocumentStore) -> Document:
    """Load the saved document, falling back to the default one.

    Never raises for bad stored data; the problem is logged and the default
    document is returned instead.
    """
    data = store.load()
    if data is None:
        logger.info("no saved document, starting from the default")
        return default_document()
    try:
        document = deserialize_document(data)
    except DocumentError as exc:
        logger.warning("discarding saved document: %s", exc)
        return default_document()
    logger.info(
        "loaded %d request(s) and %d environment(s)",
        len(document.requests),
        len(document.environments),
    )
    return document


def save_document(store: DocumentStore, document: Document) -> None:
    store.save(serialize_document(document))
    logger.info(
        "saved %d request(s) and %d environment(s)",
        len(document.requests),
        len(document.environments),
    )
