import json
import unittest

from cruzadas.core.constants import Direction
from cruzadas.core.exceptions import PuzzleFormatError
from cruzadas.core.models import PlacedWord
from cruzadas.engine.builder import GridBuilder
from cruzadas.io.serialization import (
    FORMAT_VERSION,
    dumps,
    loads,
    puzzle_from_jsonable,
    puzzle_to_jsonable,
)


class SerializationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.puzzle = (
            GridBuilder(7)
            .build(
                [
                    PlacedWord("gato", "Felino doméstico", 3, 1, Direction.ACROSS),
                    PlacedWord("toco", "Resto de tronco", 0, 4, Direction.DOWN),
                ]
            )
            .with_user_input(3, 1, "g")
        )

    def test_document_uses_camel_case_keys(self) -> None:
        data = puzzle_to_jsonable(self.puzzle)
        self.assertEqual(data["version"], FORMAT_VERSION)
        self.assertEqual(set(data), {"version", "size", "grid", "acrossClues", "downClues"})
        cell = data["grid"][3][1]
        self.assertEqual(
            cell,
            {
                "letter": "g",
                "isBlocked": False,
                "number": 2,
                "userInput": "g",
                "across": 2,
                "down": None,
                "isCorrect": False,
            },
        )
        clue = data["downClues"][0]
        self.assertEqual(clue["startRow"], 0)
        self.assertEqual(clue["startCol"], 4)
        self.assertEqual(clue["direction"], "down")

    def test_round_trip_preserves_puzzle(self) -> None:
        self.assertEqual(loads(dumps(self.puzzle)), self.puzzle)
        self.assertIn("Felino doméstico", dumps(self.puzzle))

    def test_not_json_raises(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            loads("{not json")

    def test_missing_field_raises(self) -> None:
        data = puzzle_to_jsonable(self.puzzle)
        del data["acrossClues"]
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_jsonable(data)

    def test_wrong_row_count_raises(self) -> None:
        data = puzzle_to_jsonable(self.puzzle)
        data["grid"] = data["grid"][:-1]
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_jsonable(data)

    def test_wrong_types_raise(self) -> None:
        cases = []
        data = puzzle_to_jsonable(self.puzzle)
        data["grid"][0][0]["isBlocked"] = "yes"
        cases.append(data)
        data = puzzle_to_jsonable(self.puzzle)
        data["acrossClues"][0]["number"] = True
        cases.append(data)
        data = puzzle_to_jsonable(self.puzzle)
        data["downClues"][0]["direction"] = "diagonal"
        cases.append(data)
        data = puzzle_to_jsonable(self.puzzle)
        data["grid"][3][1]["userInput"] = "ga"
        cases.append(data)
        for case in cases:
            with self.assertRaises(PuzzleFormatError):
                puzzle_from_jsonable(case)

    def test_clue_in_wrong_list_raises(self) -> None:
        data = puzzle_to_jsonable(self.puzzle)
        data["acrossClues"], data["downClues"] = data["downClues"], data["acrossClues"]
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_jsonable(data)

    def test_unknown_version_raises(self) -> None:
        data = puzzle_to_jsonable(self.puzzle)
        data["version"] = 99
        with self.assertRaises(PuzzleFormatError):
            puzzle_from_jsonable(json.loads(json.dumps(data)))

    def test_non_object_raises(self) -> None:
        for value in (None, [], "puzzle", 3):
            with self.assertRaises(PuzzleFormatError):
                puzzle_from_jsonable(value)


if __name__ == "__main__":
    unittest.main()
