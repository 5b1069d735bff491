import unittest
from datetime import datetime, timezone

from rmfs.models import Item, make_trash_item
from rmfs.util.kinds import COLLECTION_KIND, DOCUMENT_KIND, TRASH_ID, TRASH_NAME


class TestItem(unittest.TestCase):
    def test_item_required_fields(self) -> None:
        item = Item(id="1", parent_id="", display_name="n", kind=DOCUMENT_KIND)
        self.assertEqual(item.id, "1")
        self.assertEqual(item.lineage, [])
        self.assertEqual(item.canonical_path, "")
        self.assertIsNone(item.modified_client)
        self.assertIsNone(item.size)
        self.assertIsNone(item.md5_checksum)

    def test_item_optional_fields(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        item = Item(
            id="2",
            parent_id="1",
            display_name="notebook",
            kind=DOCUMENT_KIND,
            version=4,
            modified_client=dt,
            blob_url="https://blob/2",
            current_page=7,
            bookmarked=True,
        )
        self.assertEqual(item.version, 4)
        self.assertEqual(item.modified_client, dt)
        self.assertEqual(item.current_page, 7)
        self.assertTrue(item.bookmarked)

    def test_is_root_level(self) -> None:
        item = Item(id="1", parent_id="", display_name="n", kind=DOCUMENT_KIND)
        item.lineage = ["1"]
        self.assertTrue(item.is_root_level)
        item.lineage = ["0", "1"]
        self.assertFalse(item.is_root_level)

    def test_make_trash_item(self) -> None:
        trash = make_trash_item()
        self.assertEqual(trash.id, TRASH_ID)
        self.assertEqual(trash.parent_id, "")
        self.assertEqual(trash.display_name, TRASH_NAME)
        self.assertEqual(trash.kind, COLLECTION_KIND)


if __name__ == "__main__":
    unittest.main()
