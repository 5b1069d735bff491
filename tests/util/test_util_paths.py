import unittest

from rmfs.util.paths import join_root, normalize_path, split_levels, strip_root


class TestUtilPaths(unittest.TestCase):
    def test_split_levels(self) -> None:
        self.assertEqual(split_levels(""), [])
        self.assertEqual(split_levels("/"), [])
        self.assertEqual(split_levels("a/b"), ["a", "b"])
        self.assertEqual(split_levels("/a/b/"), ["a", "b"])

    def test_normalize_path(self) -> None:
        self.assertEqual(normalize_path("/Books/Novels/"), "Books/Novels")
        self.assertEqual(normalize_path("//"), "")

    def test_join_root(self) -> None:
        self.assertEqual(join_root("", ""), "")
        self.assertEqual(join_root("", "dir"), "dir")
        self.assertEqual(join_root("/Books", ""), "Books")
        self.assertEqual(join_root("Books/", "/Novels/"), "Books/Novels")

    def test_strip_root(self) -> None:
        self.assertEqual(strip_root("Books/Novels/x", "Books", own_name="x"), "Novels/x")
        self.assertEqual(strip_root("Books", "Books", own_name="Books"), "Books")
        self.assertEqual(strip_root("Other/x", "Books", own_name="x"), "Other/x")
        self.assertEqual(strip_root("a/b", "", own_name="b"), "a/b")

    def test_strip_root_requires_segment_boundary(self) -> None:
        self.assertEqual(strip_root("Booksmore/x", "Books", own_name="x"), "Booksmore/x")

    def test_strip_is_inverse_of_join(self) -> None:
        for root, rel in (("Books", "a/b"), ("A/B", "c"), ("", "x/y")):
            full = join_root(root, rel)
            self.assertEqual(strip_root(full, root, own_name=rel.split("/")[-1]), rel)


if __name__ == "__main__":
    unittest.main()
