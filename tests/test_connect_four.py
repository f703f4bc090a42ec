"""Tests for Connect-Four gravity and 4-in-a-row detection."""

import random

from engine.connect_four import (
    COLS,
    ROWS,
    check_draw,
    check_winner,
    create_board,
    lowest_empty_row,
    make_move,
    start_new_game,
)
from models.game_state import GameStatus, Player

P1, P2 = Player.P1, Player.P2


def _play(columns: list[int]):
    """Helper to drop pieces into the given columns, alternating players."""
    state = start_new_game()
    for column in columns:
        state = make_move(state, column)
    return state


def _full_board_without_winner():
    """A full 6x7 board with no run of four (pattern of 2-high stripes)."""
    board = create_board()
    for row in range(ROWS):
        for col in range(COLS):
            board[row][col] = P1 if ((row // 2) + col) % 2 == 0 else P2
    return board


class TestCreateBoard:
    """Tests for create_board()."""

    def test_dimensions(self):
        board = create_board()
        assert len(board) == 6
        assert all(len(row) == 7 for row in board)
        assert all(cell is None for row in board for cell in row)


class TestCheckWinner:
    """Tests for check_winner()."""

    def test_horizontal(self):
        board = create_board()
        for col in range(2, 6):
            board[5][col] = P1
        assert check_winner(board) == P1

    def test_vertical(self):
        board = create_board()
        for row in range(1, 5):
            board[row][6] = P2
        assert check_winner(board) == P2

    def test_diagonal_down_right(self):
        board = create_board()
        for i in range(4):
            board[i][i + 1] = P1
        assert check_winner(board) == P1

    def test_diagonal_up_right(self):
        board = create_board()
        for i in range(4):
            board[5 - i][i] = P2
        assert check_winner(board) == P2

    def test_three_is_not_enough(self):
        board = create_board()
        for col in range(3):
            board[5][col] = P1
        assert check_winner(board) is None

    def test_striped_full_board_has_no_winner(self):
        assert check_winner(_full_board_without_winner()) is None


class TestCheckDraw:
    """Tests for check_draw()."""

    def test_full_board(self):
        assert check_draw(_full_board_without_winner())

    def test_empty_board(self):
        assert not check_draw(create_board())


class TestLowestEmptyRow:
    """Tests for lowest_empty_row()."""

    def test_empty_column(self):
        assert lowest_empty_row(create_board(), 3) == ROWS - 1

    def test_partly_filled(self):
        board = create_board()
        board[5][3] = P1
        board[4][3] = P2
        assert lowest_empty_row(board, 3) == 3

    def test_full_column(self):
        board = create_board()
        for row in range(ROWS):
            board[row][0] = P1
        assert lowest_empty_row(board, 0) is None

    def test_out_of_range(self):
        assert lowest_empty_row(create_board(), 7) is None
        assert lowest_empty_row(create_board(), -1) is None


class TestMakeMove:
    """Tests for make_move()."""

    def test_piece_falls_to_bottom(self):
        state = make_move(start_new_game(), 2)
        assert state.board[5][2] == P1
        assert state.current_player == P2

    def test_pieces_stack(self):
        state = _play([2, 2, 2])
        assert state.board[5][2] == P1
        assert state.board[4][2] == P2
        assert state.board[3][2] == P1

    def test_full_column_is_noop(self):
        state = _play([0] * ROWS)
        assert state.current_player == P1
        after = make_move(state, 0)
        assert after is state
        assert after.current_player == P1

    def test_vertical_win(self):
        state = _play([0, 1, 0, 1, 0, 1, 0])
        assert state.status == GameStatus.WIN
        assert state.winner == P1
        assert state.current_player == P1

    def test_terminal_state_absorbs_moves(self):
        state = _play([0, 1, 0, 1, 0, 1, 0])
        assert make_move(state, 3) is state

    def test_draw(self):
        """Filling the last cell without a run of four is a draw."""
        board = _full_board_without_winner()
        board[0][6] = None
        state = start_new_game().model_copy(update={"board": board})
        state = make_move(state, 6)
        assert state.status == GameStatus.DRAW
        assert state.winner is None
        assert state.current_player == P1


class TestRandomPlay:
    """Simulated games end with at most one winner on the board."""

    def test_no_dual_win(self):
        rng = random.Random(11)
        for _ in range(200):
            state = start_new_game()
            while not state.is_terminal:
                open_columns = [c for c in range(COLS) if state.board[0][c] is None]
                state = make_move(state, rng.choice(open_columns))
            if state.status == GameStatus.WIN:
                loser_board = [
                    [cell if cell == state.winner.opponent else None for cell in row]
                    for row in state.board
                ]
                assert check_winner(loser_board) is None
