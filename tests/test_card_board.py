import unittest

from concentration_core.board import Board
from concentration_core.card import ALPHABET, MATCHED, Card, Matched
from concentration_core.errors import OutOfRange


def make_board(rows):
    flat = []
    for r in rows:
        assert len(r) == len(rows)
        flat.extend(r)
    return Board(len(rows), flat)


class TestCard(unittest.TestCase):
    def test_given_new_card_when_showing_and_hiding_then_visibility_toggles(self):
        card = Card('a')
        self.assertFalse(card.visible)
        card.show()
        self.assertTrue(card.visible)
        card.hide()
        self.assertFalse(card.visible)

    def test_given_cards_when_comparing_then_equal_by_symbol_not_identity(self):
        a1, a2, b = Card('a'), Card('a'), Card('b')
        a2.show()
        self.assertTrue(a1.matches(a2))
        self.assertEqual(a1, a2)
        self.assertNotEqual(a1, b)
        self.assertEqual(hash(a1), hash(a2))

    def test_given_non_card_when_comparing_then_false_without_raising(self):
        card = Card('a')
        self.assertFalse(card.matches(MATCHED))
        self.assertFalse(card.matches('a'))
        self.assertFalse(card.matches(None))
        self.assertNotEqual(card, MATCHED)
        self.assertNotEqual(MATCHED, card)

    def test_given_reserved_or_unknown_symbol_when_creating_card_then_value_error(self):
        self.assertNotIn('X', ALPHABET)
        self.assertEqual(len(ALPHABET), 51)
        for bad in ('X', '1', 'ab', ''):
            with self.assertRaises(ValueError):
                Card(bad)

    def test_given_matched_marker_when_constructed_again_then_same_instance(self):
        self.assertIs(Matched(), MATCHED)


class TestBoard(unittest.TestCase):
    def test_given_symbols_when_building_then_row_major_hidden_cards(self):
        board = make_board([['a', 'b'], ['b', 'a']])
        self.assertEqual(board.size, 2)
        self.assertEqual(board.get(0, 1).symbol, 'b')
        self.assertEqual(board[1, 1].symbol, 'a')
        self.assertTrue(all(not board[c].visible for c in board.coords()))

    def test_given_wrong_symbol_count_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            Board(2, ['a', 'a', 'b'])

    def test_given_out_of_range_coords_when_accessing_then_out_of_range(self):
        board = make_board([['a', 'b'], ['b', 'a']])
        for r, c in [(2, 0), (0, 2), (-1, 0), (0, -1)]:
            with self.assertRaises(OutOfRange):
                board.get(r, c)
            with self.assertRaises(OutOfRange):
                board.set(r, c, MATCHED)
        self.assertTrue(issubclass(OutOfRange, IndexError))

    def test_given_non_cell_value_when_setting_then_type_error(self):
        board = make_board([['a', 'b'], ['b', 'a']])
        with self.assertRaises(TypeError):
            board[0, 0] = 'a'

    def test_given_board_when_iterating_rows_then_restartable_tuples(self):
        board = make_board([['a', 'b'], ['b', 'a']])
        first = [[c.symbol for c in row] for row in board.rows()]
        second = [[c.symbol for c in row] for row in board]
        self.assertEqual(first, [['a', 'b'], ['b', 'a']])
        self.assertEqual(first, second)
        self.assertIsInstance(next(board.rows()), tuple)

    def test_given_markers_when_all_cells_matched_then_fully_matched(self):
        board = make_board([['a', 'b'], ['b', 'a']])
        self.assertEqual(board.remaining_pairs(), 2)
        board[0, 0] = MATCHED
        board[1, 1] = MATCHED
        self.assertFalse(board.is_fully_matched())
        self.assertEqual(board.remaining_pairs(), 1)
        board[0, 1] = MATCHED
        board[1, 0] = MATCHED
        self.assertTrue(board.is_fully_matched())
        self.assertEqual(board.remaining_pairs(), 0)


if __name__ == '__main__':
    unittest.main()
