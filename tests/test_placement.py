import random
import unittest

from cruzadas.core.constants import Direction
from cruzadas.core.exceptions import GenerationFailed, SlotPlacementError
from cruzadas.core.models import IntersectionCandidate, PlacedWord
from cruzadas.data.word_bank import WordEntry
from cruzadas.engine.grid import PlacementGrid
from cruzadas.engine.placement import PlacementConfig, PlacementEngine


def entries(*words: str):
    return [WordEntry(word=word, clue=f"Pista {word}") for word in words]


class PlacementGridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = PlacementGrid(7)
        self.grid.place(PlacedWord("gato", "Felino", 3, 1, Direction.ACROSS))

    def test_crossing_counts_shared_letters(self) -> None:
        self.assertEqual(self.grid.intersection_count("toco", 0, 4, Direction.DOWN), 1)

    def test_rejects_out_of_bounds(self) -> None:
        self.assertIsNone(self.grid.intersection_count("toco", 4, 4, Direction.DOWN))

    def test_rejects_letter_conflict(self) -> None:
        self.assertIsNone(self.grid.intersection_count("mesa", 0, 4, Direction.DOWN))

    def test_rejects_parallel_neighbours(self) -> None:
        self.assertIsNone(self.grid.intersection_count("sol", 4, 1, Direction.ACROSS))
        self.assertIsNone(self.grid.intersection_count("sol", 2, 2, Direction.ACROSS))

    def test_rejects_touching_word_ends(self) -> None:
        # Would end right above the 'g' at (3,1).
        self.assertIsNone(self.grid.intersection_count("sol", 0, 1, Direction.DOWN))
        # Would start right after the 'o' at (3,4).
        self.assertIsNone(self.grid.intersection_count("ar", 3, 5, Direction.ACROSS))

    def test_rejects_same_direction_overlap(self) -> None:
        self.assertIsNone(self.grid.intersection_count("gato", 3, 1, Direction.ACROSS))

    def test_crossing_starts_are_perpendicular(self) -> None:
        starts = list(self.grid.crossing_starts("toco"))
        self.assertIn((0, 4, Direction.DOWN), starts)
        self.assertIn((3, 3, Direction.DOWN), starts)
        self.assertTrue(all(direction == Direction.DOWN for _, _, direction in starts))
        self.assertEqual(len(starts), len(set(starts)))

    def test_place_invalid_raises(self) -> None:
        with self.assertRaises(SlotPlacementError):
            self.grid.place(PlacedWord("sol", "Astro", 4, 1, Direction.ACROSS))

    def test_place_tracks_occupancy(self) -> None:
        self.grid.place(PlacedWord("toco", "Resto", 0, 4, Direction.DOWN))
        self.assertEqual(self.grid.occupancy[3][4], {Direction.ACROSS, Direction.DOWN})
        self.assertEqual(self.grid.filled_cells(), 7)


class IntersectionCandidateTests(unittest.TestCase):
    def test_rank_prefers_more_crossings_then_position(self) -> None:
        candidates = [
            IntersectionCandidate(2, 4, Direction.DOWN, 1),
            IntersectionCandidate(0, 4, Direction.DOWN, 1),
            IntersectionCandidate(5, 0, Direction.ACROSS, 2),
            IntersectionCandidate(0, 4, Direction.ACROSS, 1),
        ]
        ordered = sorted(candidates, key=IntersectionCandidate.rank)
        self.assertEqual(ordered[0], candidates[2])
        self.assertEqual(ordered[1], candidates[3])
        self.assertEqual(ordered[2], candidates[1])


class PlacementEngineTests(unittest.TestCase):
    def test_two_crossing_words(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=7, target_word_count=2, seed=1))
        result = engine.place(entries("gato", "toco"))
        self.assertEqual(result.attempts, 1)
        gato, toco = result.placed_words
        self.assertEqual((gato.word, gato.row, gato.col, gato.direction), ("gato", 3, 1, Direction.ACROSS))
        self.assertEqual((toco.word, toco.row, toco.col, toco.direction), ("toco", 0, 4, Direction.DOWN))

    def test_longest_word_is_anchored_in_the_middle(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=9, target_word_count=3, seed=1))
        result = engine.place(entries("sol", "floresta", "lago"))
        anchor = result.placed_words[0]
        self.assertEqual(anchor.word, "floresta")
        self.assertEqual((anchor.row, anchor.col, anchor.direction), (4, 0, Direction.ACROSS))

    def test_single_word_is_enough_for_single_candidate(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=5, target_word_count=10))
        result = engine.place(entries("casa"))
        self.assertEqual(len(result.placed_words), 1)
        self.assertEqual((result.placed_words[0].row, result.placed_words[0].col), (2, 0))

    def test_words_without_crossings_are_skipped(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=7, target_word_count=3, seed=2))
        result = engine.place(entries("gato", "toco", "xyz"))
        self.assertEqual([placed.word for placed in result.placed_words], ["gato", "toco"])
        self.assertEqual(result.skipped, ["xyz"])

    def test_target_count_caps_placement(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=9, target_word_count=2, seed=1))
        result = engine.place(entries("gato", "toco", "tatu", "cota"))
        self.assertEqual(len(result.placed_words), 2)

    def test_no_crossing_possible_fails_after_retries(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=5, target_word_count=2, max_attempts=3, seed=1))
        with self.assertRaises(GenerationFailed):
            engine.place(entries("abc", "xyz"))

    def test_words_longer_than_grid_are_dropped(self) -> None:
        engine = PlacementEngine(PlacementConfig(grid_size=4, target_word_count=2))
        with self.assertRaises(GenerationFailed):
            engine.place(entries("floresta", "orvalho"))

    def test_retries_reshuffle_candidate_order(self) -> None:
        # "xyzw" blocks everything as anchor; a reshuffle lets "gato" lead.
        engine = PlacementEngine(
            PlacementConfig(grid_size=7, target_word_count=2, max_attempts=10),
            rng=random.Random(0),
        )
        result = engine.place(entries("xyzwq", "gato", "toco"))
        self.assertGreater(result.attempts, 1)
        self.assertEqual({placed.word for placed in result.placed_words}, {"gato", "toco"})

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PlacementEngine(PlacementConfig(grid_size=0))
        with self.assertRaises(ValueError):
            PlacementEngine(PlacementConfig(max_attempts=0))


if __name__ == "__main__":
    unittest.main()
