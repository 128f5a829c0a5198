"""
Symmetry and canonicalization for boards.
Teaching notes:
- There are 8 symmetries (the dihedral group of the square). Using them reduces redundancy.
- We canonicalize a board by taking the lexicographically smallest image among all symmetries.
- Squares move with the board; we precompute index maps.
"""
from functools import lru_cache
from typing import Callable, Dict, List

from .board import Board
from .square import Square

ALL_SYMS = ['id', 'rot90', 'rot180', 'rot270', 'hflip', 'vflip', 'd1', 'd2']

_TRANSFORMS: Dict[str, Callable[[Board], Board]] = {
    'id': lambda b: b.copy(),
    'rot90': lambda b: b.rotated_right(1),
    'rot180': lambda b: b.flipped_horizontally_and_vertically(),
    'rot270': lambda b: b.rotated_left(1),
    'hflip': lambda b: b.flipped_horizontally(),
    'vflip': lambda b: b.flipped_vertically(),
    # transpose and anti-transpose
    'd1': lambda b: b.rotated_left(1).flipped_vertically(),
    'd2': lambda b: b.rotated_right(1).flipped_vertically(),
}


def transform_board(board: Board, kind: str) -> Board:
    try:
        transform = _TRANSFORMS[kind]
    except KeyError:
        raise ValueError(f"Unknown transformation: {kind}") from None
    return transform(board)


def sym_index_map(kind: str) -> List[int]:
    # Track a lone marker through the transform to see where each square lands.
    mapping = []
    for square in Square:
        b = Board.from_hash(0x3FFFF & ~(0b11 << (square * 2)))
        tb = transform_board(b, kind)
        mapping.append(next(s for s, mark in tb if mark is not None))
    return mapping


SYMM_INDEX_MAPS = {k: sym_index_map(k) for k in ALL_SYMS}


def apply_square_transform(square: Square, kind: str) -> Square:
    return Square(SYMM_INDEX_MAPS[kind][square])


def canonical_form(board: Board) -> Board:
    return Board.from_string(symmetry_info(board)['canonical_form'])


@lru_cache(maxsize=None)
def _symmetry_info_hash(hash_value: int) -> Dict:
    board = Board.from_hash(hash_value)
    images = []
    for k in ALL_SYMS:
        images.append((transform_board(board, k).serialize(), k))
    images_sorted = sorted(images, key=lambda x: x[0])
    canonical_str, canonical_op = images_sorted[0]
    unique_set = sorted(set(s for s, _ in images))

    board_str = board.serialize()
    any_symmetric = len(unique_set) < len(ALL_SYMS)

    return {
        'canonical_form': canonical_str,
        'canonical_op': canonical_op,
        'canonical_hash': Board.from_string(canonical_str).hash_value,
        'orbit_size': len(unique_set),
        'orbit_index': unique_set.index(board_str),
        'horizontal_symmetric': board.reflects_horizontally,
        'vertical_symmetric': board.reflects_vertically,
        'rotational_symmetric': board.reflects_horizontally_and_vertically,
        'diagonal_symmetric': (
            transform_board(board, 'd1') == board or transform_board(board, 'd2') == board
        ),
        'any_symmetric': any_symmetric,
    }


def symmetry_info(board: Board) -> Dict:
    return dict(_symmetry_info_hash(board.hash_value))
