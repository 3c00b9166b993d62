from contextlib import contextmanager

from utils import pmts

from dsn.document.structure import Document, DocumentRange


class TextContentStorage(object):
    """Holds the current (immutable) Document and replaces it wholesale on edits.

    Edits are only allowed inside an editing transaction; layout managers that are attached to the storage are told
    about the new document when the outermost transaction ends.

    >>> storage = TextContentStorage()
    >>> with storage.perform_editing_transaction():
    ...     storage.replace_contents(storage.document_range, ["hello\\n", "world"])
    >>> storage.document.text
    'hello\\nworld'
    >>> storage.replace_contents(storage.document_range, [])
    Traceback (most recent call last):
    ...
    AssertionError: No editing transaction was started. Wrap the call in perform_editing_transaction()
    """

    def __init__(self, document=None):
        self.document = document if document is not None else Document([])
        self.layout_managers = []
        self._transaction_depth = 0
        self._edited = False

    @property
    def document_range(self):
        return self.document.document_range

    @property
    def has_editing_transaction(self):
        return self._transaction_depth > 0

    def add_layout_manager(self, layout_manager):
        self.layout_managers.append(layout_manager)
        layout_manager.text_content_storage = self
        layout_manager.replace_document(self.document)

    @contextmanager
    def perform_editing_transaction(self):
        self._transaction_depth += 1
        try:
            yield self
        finally:
            self._transaction_depth -= 1

            # Also when the transaction body raised: edits made before that have replaced the document.
            if self._transaction_depth == 0 and self._edited:
                self._edited = False
                for layout_manager in self.layout_managers:
                    layout_manager.replace_document(self.document)

    def replace_contents(self, document_range, paragraph_texts):
        """Replaces the text in `document_range` with the concatenation of `paragraph_texts`."""
        assert self.has_editing_transaction, \
            "No editing transaction was started. Wrap the call in perform_editing_transaction()"
        pmts(document_range, DocumentRange)

        text = self.document.text
        start = self.document.offset(self.document_range.location, document_range.location)
        end = start + document_range.length

        self.document = Document.from_text(text[:start] + "".join(paragraph_texts) + text[end:])
        self._edited = True
