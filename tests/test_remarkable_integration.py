import argparse
import os
import unittest

from rmfs import AuthInfo, FsOptions, NotFoundError, RemarkableFs


def _env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise unittest.SkipTest(f"Missing env var: {name}")
    return value


class TestRemarkableIntegration(unittest.TestCase):
    """
    Integration test against the real document store (read-only).

    Required env vars:
        - RMFS_DEVICE_TOKEN: device token of a registered device

    Optional:
        - RMFS_ROOT: store-relative root to list from (default: store root)
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.auth_info = AuthInfo(
            kind="device_token",
            data={"device_token": _env("RMFS_DEVICE_TOKEN")},
        )
        cls.options = FsOptions(root=os.environ.get("RMFS_ROOT", ""))

    def test_list_walk_smoke(self) -> None:
        fs = RemarkableFs(self.auth_info, options=self.options)

        # 1) root listing triggers the one and only fetch
        entries = fs.list("")
        self.assertTrue(fs.is_loaded)

        # 2) every directory entry is listable, every name resolves back
        for entry in entries:
            resolved = fs.resolve_item(entry.name)
            self.assertEqual(resolved.canonical_path, entry.item.canonical_path)
            if entry.is_dir:
                fs.list(entry.name)

        # 3) unknown paths are NotFound, not crashes
        with self.assertRaises(NotFoundError):
            fs.list("rmfs-integration-does-not-exist")

    def test_index_inverse_holds_on_live_data(self) -> None:
        fs = RemarkableFs(self.auth_info, options=self.options)
        for path, item in fs.index.path_to_item.items():
            self.assertEqual(item.canonical_path, path)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose unittest output",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    unittest.main(verbosity=2 if args.verbose else 1)
