"""
Tetris scene.

A scripted game that fits one animation cycle: five tetrominoes spawn
20 frames apart, fall one row every 3 frames, stack, and full rows
flash before they are cleared. The board resets whenever frame 0 comes
around again.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from holidaylights.graphics.primitives import draw_glyphs, draw_rect
from holidaylights.imagers.base import Imager
from holidaylights.model.cell import BLACK, Cell, Color
from holidaylights.model.matrix import Matrix
from holidaylights.scenes.base import SCENE_SIZE

GRID_WIDTH = 10
GRID_HEIGHT = 10
GRID_OFFSET_X = 7
GRID_OFFSET_Y = 13
BLOCK_SIZE = 5
SPAWN_INTERVAL = 20  # Frames between spawns
FALL_SPEED = 3  # Frames per row
PIECE_COUNT = 5
CLEAR_FLASH_FRAMES = 5

BORDER_COLOR: Color = (100, 100, 150)

# Shape blocks relative to the piece origin, and the piece color
TETROMINOES: Dict[str, Tuple[List[Tuple[int, int]], Color]] = {
    "I": ([(0, 0), (1, 0), (2, 0), (3, 0)], (0, 255, 255)),
    "O": ([(0, 0), (1, 0), (0, 1), (1, 1)], (255, 255, 0)),
    "T": ([(1, 0), (0, 1), (1, 1), (2, 1)], (128, 0, 128)),
    "S": ([(1, 0), (2, 0), (0, 1), (1, 1)], (0, 255, 0)),
    "Z": ([(0, 0), (1, 0), (1, 1), (2, 1)], (255, 0, 0)),
    "J": ([(0, 0), (0, 1), (1, 1), (2, 1)], (0, 0, 255)),
    "L": ([(2, 0), (0, 1), (1, 1), (2, 1)], (255, 165, 0)),
}
PIECE_ORDER = ["I", "O", "T", "S", "Z", "J", "L"]

# 5x5 title font
TITLE_GLYPHS = {
    "T": [[1, 1, 1, 1, 1], [0, 0, 1, 0, 0], [0, 0, 1, 0, 0], [0, 0, 1, 0, 0], [0, 0, 1, 0, 0]],
    "E": [[1, 1, 1, 1, 1], [1, 0, 0, 0, 0], [1, 1, 1, 1, 0], [1, 0, 0, 0, 0], [1, 1, 1, 1, 1]],
    "R": [[1, 1, 1, 1, 0], [1, 0, 0, 0, 1], [1, 1, 1, 1, 0], [1, 0, 1, 0, 0], [1, 0, 0, 1, 0]],
    "I": [[1, 1, 1, 1, 1], [0, 0, 1, 0, 0], [0, 0, 1, 0, 0], [0, 0, 1, 0, 0], [1, 1, 1, 1, 1]],
    "S": [[0, 1, 1, 1, 1], [1, 0, 0, 0, 0], [0, 1, 1, 1, 0], [0, 0, 0, 0, 1], [1, 1, 1, 1, 0]],
}


@dataclass
class Piece:
    kind: str
    x: int = 4
    y: int = -2  # Spawns above the visible board
    landed: bool = False

    @property
    def blocks(self) -> List[Tuple[int, int]]:
        return TETROMINOES[self.kind][0]

    @property
    def color(self) -> Color:
        return TETROMINOES[self.kind][1]


class TetrisScene(Imager):
    """Scripted falling-block game on a 10x10 board of 5px blocks."""

    name = "tetris"

    def __init__(self) -> None:
        self.pieces: List[Piece] = []
        self.settled: Dict[Tuple[int, int], Color] = {}
        self.lines_to_clear: List[int] = []
        self.clear_frame = -1
        self.reset()

    def reset(self) -> None:
        """Empty the board and queue the pieces again."""
        self.settled.clear()
        self.lines_to_clear = []
        self.clear_frame = -1
        self.pieces = [Piece(PIECE_ORDER[i % len(PIECE_ORDER)]) for i in range(PIECE_COUNT)]

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        if frame == 0:
            self.reset()

        matrix = Matrix(SCENE_SIZE, lambda x, y: Cell(BLACK, 0))

        self._update(frame)
        self._draw_borders(matrix)

        for (gx, gy), color in self.settled.items():
            self._draw_block(matrix, gx, gy, color)

        if self.clear_frame >= 0 and self.clear_frame <= frame < self.clear_frame + CLEAR_FLASH_FRAMES:
            self._draw_clear_flash(matrix, frame - self.clear_frame)
        elif self.clear_frame >= 0 and frame == self.clear_frame + CLEAR_FLASH_FRAMES:
            self._clear_lines()
            self.clear_frame = -1

        self._draw_falling(matrix, frame)
        draw_glyphs(matrix, "TETRIS", 17, 5, (255, 255, 255), TITLE_GLYPHS)

        return matrix

    def _active_pieces(self, frame: int):
        """Spawned, still-falling pieces with their spawn frame."""
        for i, piece in enumerate(self.pieces):
            spawn_frame = i * SPAWN_INTERVAL
            if frame < spawn_frame:
                break
            if not piece.landed:
                yield piece, spawn_frame

    # Game state
    def _update(self, frame: int) -> None:
        for piece, spawn_frame in self._active_pieces(frame):
            since_spawn = frame - spawn_frame
            if since_spawn % FALL_SPEED != 0:
                continue

            piece.y = since_spawn // FALL_SPEED - 2
            if self._should_land(piece):
                piece.landed = True
                self._settle(piece)
                self._check_lines(frame)

    def _should_land(self, piece: Piece) -> bool:
        for bx, by in piece.blocks:
            below = (piece.x + bx, piece.y + by + 1)
            if below[1] >= GRID_HEIGHT or below in self.settled:
                return True
        return False

    def _settle(self, piece: Piece) -> None:
        for bx, by in piece.blocks:
            gy = piece.y + by
            if gy >= 0:
                self.settled[(piece.x + bx, gy)] = piece.color

    def _check_lines(self, frame: int) -> None:
        full = [
            y for y in range(GRID_HEIGHT)
            if all((x, y) in self.settled for x in range(GRID_WIDTH))
        ]
        if full:
            self.lines_to_clear = full
            self.clear_frame = frame + 1

    def _clear_lines(self) -> None:
        remaining = {
            pos: color for pos, color in self.settled.items()
            if pos[1] not in self.lines_to_clear
        }
        # Shift each block down by the number of cleared rows beneath it
        self.settled = {
            (x, y + sum(1 for cleared in self.lines_to_clear if cleared > y)): color
            for (x, y), color in remaining.items()
        }
        self.lines_to_clear = []

    # Drawing
    def _draw_block(self, matrix: Matrix, gx: int, gy: int, color: Color) -> None:
        draw_rect(
            matrix,
            GRID_OFFSET_X + gx * BLOCK_SIZE,
            GRID_OFFSET_Y + gy * BLOCK_SIZE,
            BLOCK_SIZE,
            BLOCK_SIZE,
            color,
        )

    def _draw_borders(self, matrix: Matrix) -> None:
        board_w = GRID_WIDTH * BLOCK_SIZE
        board_h = GRID_HEIGHT * BLOCK_SIZE
        draw_rect(matrix, GRID_OFFSET_X - 1, GRID_OFFSET_Y, 1, board_h, BORDER_COLOR)
        draw_rect(matrix, GRID_OFFSET_X + board_w, GRID_OFFSET_Y, 1, board_h, BORDER_COLOR)
        draw_rect(matrix, GRID_OFFSET_X - 1, GRID_OFFSET_Y + board_h, board_w + 2, 1, BORDER_COLOR)

    def _draw_clear_flash(self, matrix: Matrix, step: int) -> None:
        color = (255, 255, 255) if step % 2 == 0 else (255, 255, 0)
        for y in self.lines_to_clear:
            for x in range(GRID_WIDTH):
                self._draw_block(matrix, x, y, color)

    def _draw_falling(self, matrix: Matrix, frame: int) -> None:
        for piece, _ in self._active_pieces(frame):
            for bx, by in piece.blocks:
                gy = piece.y + by
                if gy >= 0:
                    self._draw_block(matrix, piece.x + bx, gy, piece.color)
