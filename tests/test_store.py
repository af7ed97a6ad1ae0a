import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from cruzadas.core.exceptions import StoreError
from cruzadas.io.store import JsonFileStore, MemoryStore, PersistenceWriter


class JsonFileStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.store_dir = Path(self._tmpdir.name) / "store"
        self.store = JsonFileStore(self.store_dir)

    def test_save_and_load(self) -> None:
        self.store.save("crossword_puzzle", {"size": 7, "text": "Coração"})
        self.assertEqual(self.store.load("crossword_puzzle"), {"size": 7, "text": "Coração"})
        self.assertTrue((self.store_dir / "crossword_puzzle.json").exists())
        self.assertFalse(any(path.suffix == ".tmp" for path in self.store_dir.iterdir()))

    def test_missing_key_is_none(self) -> None:
        self.assertIsNone(self.store.load("crossword_puzzle"))

    def test_corrupt_file_is_a_miss(self) -> None:
        (self.store_dir / "crossword_puzzle.json").write_text("{broken", encoding="utf-8")
        self.assertIsNone(self.store.load("crossword_puzzle"))

    def test_remove_is_idempotent(self) -> None:
        self.store.save("crossword_game_started", True)
        self.store.remove("crossword_game_started")
        self.store.remove("crossword_game_started")
        self.assertIsNone(self.store.load("crossword_game_started"))

    def test_unserializable_value_raises(self) -> None:
        with self.assertRaises(StoreError):
            self.store.save("crossword_puzzle", {"value": object()})

    def test_invalid_key_raises(self) -> None:
        with self.assertRaises(StoreError):
            self.store.save("!!!", 1)


class MemoryStoreTests(unittest.TestCase):
    def test_values_are_copied_through_json(self) -> None:
        store = MemoryStore()
        value = {"grid": [[1, 2]]}
        store.save("k", value)
        value["grid"][0][0] = 9
        self.assertEqual(store.load("k"), {"grid": [[1, 2]]})
        self.assertEqual(store.keys(), ["k"])

    def test_corrupt_entry_is_a_miss(self) -> None:
        store = MemoryStore()
        store.save_raw("k", "{nope")
        self.assertIsNone(store.load("k"))

    def test_remove_missing_key(self) -> None:
        store = MemoryStore()
        store.remove("absent")
        self.assertEqual(store.keys(), [])


class PersistenceWriterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.writer = PersistenceWriter(retries=1)
        self.addCleanup(self.writer.close)

    def test_writes_run_in_submission_order(self) -> None:
        calls = []
        for index in range(5):
            self.writer.submit(f"write {index}", lambda index=index: calls.append(index))
        self.writer.flush()
        self.assertEqual(calls, [0, 1, 2, 3, 4])

    def test_failed_write_is_retried(self) -> None:
        operation = MagicMock(side_effect=[StoreError("disk full"), None])
        future = self.writer.submit("puzzle", operation)
        self.assertTrue(future.result())
        self.assertEqual(operation.call_count, 2)

    def test_gives_up_after_retries(self) -> None:
        operation = MagicMock(side_effect=StoreError("disk full"))
        with self.assertLogs("cruzadas.io.store", level="ERROR"):
            future = self.writer.submit("puzzle", operation)
            self.assertFalse(future.result())
        self.assertEqual(operation.call_count, 2)

    def test_adapter_errors_are_retried_and_dropped(self) -> None:
        operation = MagicMock(side_effect=OSError("disk full"))
        with self.assertLogs("cruzadas.io.store", level="WARNING") as logs:
            future = self.writer.submit("puzzle", operation)
            self.assertFalse(future.result())
            self.writer.flush()
        self.assertEqual(operation.call_count, 2)
        self.assertTrue(any("Giving up on persisting puzzle" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
