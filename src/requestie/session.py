"""Editing session: owns the document between startup and shutdown."""

import logging

from requestie.document import Document
from requestie.persistence import load_document, save_document
from requestie.storage import DocumentStore

logger = logging.getLogger(__name__)


class Session:
    """Explicit owner of the one Document edited during a process lifetime.

    The store is read once by ``open`` and written once by ``close``; no
    mutation in between touches it.  ``close`` is idempotent so that both
    the app's quit action and the CLI's shutdown path may call it.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store
        self._document: Document | None = None
        self._closed = False

    @property
    def document(self) -> Document:
        if self._document is None:
            raise RuntimeError("session has not been opened")
        return self._document

    @property
    def is_open(self) -> bool:
        return self._document is not None and not self._closed

    def open(self) -> Document:
        """Load the document from the store (or the default). Only loads once."""
        if self._document is None:
            self._document = load_document(self._store)
        return self._document

    def close(self) -> None:
        """Save the document back to the store. Later calls do nothing."""
        if self._closed or self._document is None:
            return
        save_document(self._store, self._document)
        self._closed = True
        logger.info("session closed")
