import unittest

from dsn.document.construct import TextContentStorage
from dsn.document.structure import Document, DocumentRange, Location


class RecordingLayoutManager(object):
    def __init__(self):
        self.documents = []

    def replace_document(self, document):
        self.documents.append(document)


class LocationTestCase(unittest.TestCase):

    def test_total_ordering(self):
        self.assertLess(Location(1), Location(2))
        self.assertGreaterEqual(Location(2), Location(2))
        self.assertEqual(sorted([Location(3), Location(0), Location(2)]), [Location(0), Location(2), Location(3)])

    def test_offset_within_bounds(self):
        document = Document.from_text("hello")
        self.assertEqual(document.location(Location(0), 5), document.document_range.end_location)
        self.assertIsNone(document.location(Location(0), 6))
        self.assertEqual(document.offset(Location(1), Location(4)), 3)

    def test_empty_document(self):
        document = Document.from_text("")
        self.assertTrue(document.document_range.is_empty)
        self.assertEqual(document.document_range.location, document.document_range.end_location)
        self.assertIsNone(document.location(document.document_range.end_location, -1))
        self.assertIsNone(document.paragraph_index_for_location(Location(0)))

    def test_ranges_must_be_ordered(self):
        self.assertRaises(Exception, DocumentRange, Location(3), Location(2))


class DocumentTestCase(unittest.TestCase):

    def test_paragraphs_cover_text(self):
        text = "first\n\nthird\nfourth"
        document = Document.from_text(text)

        self.assertEqual(document.text, text)
        self.assertEqual(len(document), 4)

        previous_end = Location(0)
        for paragraph in document.paragraphs:
            self.assertEqual(paragraph.element_range.location, previous_end)
            previous_end = paragraph.element_range.end_location
        self.assertEqual(previous_end, document.document_range.end_location)

    def test_paragraph_for_location(self):
        document = Document.from_text("ab\ncd\n")
        self.assertEqual(document.paragraph_index_for_location(Location(2)), 0)  # the newline
        self.assertEqual(document.paragraph_index_for_location(Location(3)), 1)
        self.assertIsNone(document.paragraph_index_for_location(Location(6)))


class TextContentStorageTestCase(unittest.TestCase):

    def test_layout_managers_are_told_once_per_transaction(self):
        storage = TextContentStorage()
        layout_manager = RecordingLayoutManager()
        storage.add_layout_manager(layout_manager)

        with storage.perform_editing_transaction():
            storage.replace_contents(storage.document_range, ["one\n", "two"])
            with storage.perform_editing_transaction():
                storage.replace_contents(DocumentRange(Location(0), Location(3)), ["ONE"])

        # one for being attached, one for the (outermost) transaction
        self.assertEqual(len(layout_manager.documents), 2)
        self.assertEqual(layout_manager.documents[-1].text, "ONE\ntwo")

    def test_transaction_without_edits_does_not_notify(self):
        storage = TextContentStorage()
        layout_manager = RecordingLayoutManager()
        storage.add_layout_manager(layout_manager)

        with storage.perform_editing_transaction():
            pass

        self.assertEqual(len(layout_manager.documents), 1)

    def test_layout_managers_are_told_when_the_transaction_fails(self):
        storage = TextContentStorage()
        layout_manager = RecordingLayoutManager()
        storage.add_layout_manager(layout_manager)

        with self.assertRaises(ValueError):
            with storage.perform_editing_transaction():
                storage.replace_contents(storage.document_range, ["new text"])
                raise ValueError("failure after the edit")

        self.assertFalse(storage.has_editing_transaction)
        self.assertEqual(layout_manager.documents[-1].text, "new text")
        self.assertIs(layout_manager.documents[-1], storage.document)

    def test_replace_outside_transaction(self):
        storage = TextContentStorage()
        self.assertRaises(AssertionError, storage.replace_contents, storage.document_range, ["x"])


if __name__ == '__main__':
    unittest.main()
