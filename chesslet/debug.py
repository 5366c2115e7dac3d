"""
Debug Utilities

Functions for saving board snapshots as PNG images and managing debug output.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .solver import BoardState, Move
from .solver.constants import BOARD_SIZE

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

CELL_SIZE = 64
MARGIN = 24

LIGHT_SQUARE = (240, 217, 181)
DARK_SQUARE = (181, 136, 99)
SOURCE_COLOR = "blue"
TARGET_COLOR = "red"


def render_board(board: BoardState, move: Optional[Move] = None,
                 caption: str = "") -> Image.Image:
    """
    Draw a board snapshot.

    Args:
        board: Board to draw
        move: Optional move to highlight (source blue, target red)
        caption: Optional text drawn under the board

    Returns:
        PIL Image
    """
    size = CELL_SIZE * BOARD_SIZE
    image = Image.new("RGB", (size + 2 * MARGIN, size + 3 * MARGIN), "white")
    draw = ImageDraw.Draw(image)

    # Try to load a font, fall back to default
    try:
        font = ImageFont.truetype("arial.ttf", CELL_SIZE // 2)
        small_font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()
        small_font = font

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            x0 = MARGIN + col * CELL_SIZE
            y0 = MARGIN + row * CELL_SIZE
            fill = LIGHT_SQUARE if (row + col) % 2 == 0 else DARK_SQUARE
            draw.rectangle([x0, y0, x0 + CELL_SIZE, y0 + CELL_SIZE], fill=fill)

            piece = board.grid[row][col]
            if piece is not None:
                draw.text((x0 + CELL_SIZE // 3, y0 + CELL_SIZE // 4), piece,
                          fill="black", font=font)

    if move is not None:
        for (row, col), color in ((move.source, SOURCE_COLOR), (move.target, TARGET_COLOR)):
            x0 = MARGIN + col * CELL_SIZE
            y0 = MARGIN + row * CELL_SIZE
            draw.rectangle([x0, y0, x0 + CELL_SIZE, y0 + CELL_SIZE], outline=color, width=3)

    if caption:
        draw.text((MARGIN, size + MARGIN + 6), caption, fill="black", font=small_font)

    return image


def save_debug_image(board: BoardState, move: Optional[Move] = None,
                     caption: str = "",
                     debug_dir: Union[str, Path] = DEBUG_DIR) -> Path:
    """
    Save a board snapshot to the debug directory.

    Keeps only the most recent MAX_DEBUG_IMAGES snapshots.

    Returns:
        Path of the written PNG
    """
    debug_dir = Path(debug_dir)
    debug_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    path = debug_dir / f"debug_{timestamp}.png"
    render_board(board, move, caption or board.fen).save(path, "PNG")

    _cleanup_debug_images(debug_dir)
    return path


def _cleanup_debug_images(debug_dir: Path) -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not debug_dir.exists():
        return

    debug_files = sorted(
        debug_dir.glob("debug_*.png"),
        key=lambda p: (p.stat().st_mtime, p.name),
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError:
            pass
