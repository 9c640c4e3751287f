"""
Unit Tests for BoardQueryAdapter

Tests for the read-only board facade:
    - Piece lookup and enumeration
    - Attacker queries (duplicates, empty results)
    - Legal move counts for either side
    - King lookup and KingNotFound
    - Snapshot isolation from the caller's board
    - AdapterQueryFailure on bad input
"""

import chess
import pytest

from king_safety.board import BoardQueryAdapter, PlacedPiece
from king_safety.errors import AdapterQueryFailure, InvalidSquare, KingNotFound


@pytest.fixture
def start():
    """Adapter over the starting position."""
    return BoardQueryAdapter(chess.Board())


class TestPieceQueries:
    """Tests for piece_at / pieces."""

    def test_piece_at(self, start):
        assert start.piece_at(chess.E1) == PlacedPiece(chess.E1, chess.KING, chess.WHITE)
        assert start.piece_at(chess.D7) == PlacedPiece(chess.D7, chess.PAWN, chess.BLACK)

    def test_empty_square(self, start):
        assert start.piece_at(chess.E4) is None

    def test_invalid_square(self, start):
        with pytest.raises(InvalidSquare):
            start.piece_at(64)

    def test_pieces(self, start):
        pieces = list(start.pieces())
        assert len(pieces) == 32
        assert pieces[0] == PlacedPiece(chess.A1, chess.ROOK, chess.WHITE)
        assert [p.square for p in pieces] == sorted(p.square for p in pieces)

    def test_placed_piece_is_frozen(self, start):
        piece = start.piece_at(chess.E1)
        with pytest.raises(AttributeError):
            piece.square = chess.E2


class TestAttackQueries:
    """Tests for attackers_of / is_attacked."""

    def test_no_attackers_is_empty_list(self, start):
        assert start.attackers_of(chess.BLACK, chess.E4) == []
        assert not start.is_attacked(chess.E4, chess.BLACK)

    def test_all_attackers_are_listed(self, start):
        # f3: pawns e2/g2 and knight g1
        kinds = start.attackers_of(chess.WHITE, chess.F3)
        assert sorted(kinds) == [chess.PAWN, chess.PAWN, chess.KNIGHT]
        assert start.is_attacked(chess.F3, chess.WHITE)

    def test_duplicate_kinds(self):
        adapter = BoardQueryAdapter.from_fen("6k1/8/8/5r2/8/3r4/8/7K w - - 0 1")
        assert adapter.attackers_of(chess.BLACK, chess.F3) == [chess.ROOK, chess.ROOK]

    def test_occupied_square_can_be_attacked(self, start):
        """Defended own pieces still count as attacked by their side."""
        assert start.is_attacked(chess.E2, chess.WHITE)


class TestLegalMoveCount:
    """Tests for legal_move_count."""

    def test_start_king_has_no_moves(self, start):
        assert start.legal_move_count(chess.E1, chess.KING) == 0

    def test_knight_moves(self, start):
        assert start.legal_move_count(chess.G1, chess.KNIGHT) == 2

    def test_side_not_to_move(self):
        adapter = BoardQueryAdapter.from_fen("7k/8/8/8/8/8/8/K7 w - - 0 1")
        assert adapter.legal_move_count(chess.A1, chess.KING) == 3
        assert adapter.legal_move_count(chess.H8, chess.KING) == 3

    def test_side_not_to_move_leaves_snapshot_alone(self, start):
        fen = start.board.fen()
        start.legal_move_count(chess.G8, chess.KNIGHT)
        assert start.board.fen() == fen
        assert start.side_to_move() == chess.WHITE

    def test_wrong_kind(self, start):
        with pytest.raises(AdapterQueryFailure):
            start.legal_move_count(chess.E1, chess.QUEEN)

    def test_empty_square(self, start):
        with pytest.raises(AdapterQueryFailure):
            start.legal_move_count(chess.E4, chess.KING)


class TestKingAndTurn:
    """Tests for king_square / side_to_move."""

    def test_king_square(self, start):
        assert start.king_square(chess.WHITE) == chess.E1
        assert start.king_square(chess.BLACK) == chess.E8

    def test_missing_king(self):
        board = chess.Board()
        board.remove_piece_at(chess.E8)
        adapter = BoardQueryAdapter(board)
        with pytest.raises(KingNotFound):
            adapter.king_square(chess.BLACK)
        assert adapter.king_square(chess.WHITE) == chess.E1

    def test_side_to_move(self, start):
        assert start.side_to_move() == chess.WHITE
        board = chess.Board()
        board.push_san("e4")
        assert BoardQueryAdapter(board).side_to_move() == chess.BLACK


class TestSnapshot:
    """The adapter works on its own copy of the board."""

    def test_later_moves_do_not_leak_in(self):
        board = chess.Board()
        adapter = BoardQueryAdapter(board)
        board.push_san("e4")
        assert adapter.piece_at(chess.E2) is not None
        assert adapter.piece_at(chess.E4) is None
        assert adapter.side_to_move() == chess.WHITE

    def test_move_stack_dropped(self):
        board = chess.Board()
        board.push_san("e4")
        adapter = BoardQueryAdapter(board)
        assert adapter.board.move_stack == []
        assert len(board.move_stack) == 1


class TestBoundary:
    """Tests for construction and notation conversion."""

    def test_from_fen_invalid(self):
        with pytest.raises(AdapterQueryFailure) as exc_info:
            BoardQueryAdapter.from_fen("not a fen")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_requires_board(self):
        with pytest.raises(AdapterQueryFailure):
            BoardQueryAdapter("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")

    def test_square_names(self):
        assert BoardQueryAdapter.square_name(chess.E1) == "e1"
        assert BoardQueryAdapter.parse_square("g8") == chess.G8

    def test_bad_square_name(self):
        with pytest.raises(AdapterQueryFailure):
            BoardQueryAdapter.parse_square("z9")

    def test_bad_square_index(self):
        with pytest.raises(InvalidSquare):
            BoardQueryAdapter.square_name(64)
