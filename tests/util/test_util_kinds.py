import unittest

from rmfs.util.kinds import (
    COLLECTION_KIND,
    DOCUMENT_KIND,
    is_collection,
    is_document,
    is_listable,
)


class TestUtilKinds(unittest.TestCase):
    def test_wire_kinds(self) -> None:
        self.assertTrue(is_document(DOCUMENT_KIND))
        self.assertTrue(is_collection(COLLECTION_KIND))
        self.assertFalse(is_document(COLLECTION_KIND))
        self.assertFalse(is_collection(DOCUMENT_KIND))

    def test_bare_aliases(self) -> None:
        self.assertTrue(is_document("Document"))
        self.assertTrue(is_collection("Collection"))

    def test_unknown_kind_is_not_listable(self) -> None:
        self.assertFalse(is_listable("TemplateType"))
        self.assertFalse(is_listable(""))
        self.assertTrue(is_listable(DOCUMENT_KIND))
        self.assertTrue(is_listable(COLLECTION_KIND))


if __name__ == "__main__":
    unittest.main()
