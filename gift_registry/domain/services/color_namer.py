"""Nearest named color for an RGB sample."""
from typing import Sequence, Tuple

# Declaration order is the tie-break order.
PALETTE: Tuple[Tuple[str, Tuple[int, int, int]], ...] = (
    ("black", (0, 0, 0)),
    ("white", (255, 255, 255)),
    ("gray", (128, 128, 128)),
    ("red", (255, 0, 0)),
    ("green", (0, 255, 0)),
    ("blue", (0, 0, 255)),
    ("yellow", (255, 255, 0)),
    ("orange", (255, 165, 0)),
    ("purple", (128, 0, 128)),
    ("pink", (255, 192, 203)),
    ("brown", (165, 42, 42)),
)


def _squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def name_color(rgb: Sequence[float]) -> str:
    """
    Return the palette color closest to rgb by Euclidean distance.

    Squared distances are compared, which preserves ordering and exact ties;
    on a tie the earlier palette entry wins.
    """
    best_name, best_rgb = PALETTE[0]
    best_distance = _squared_distance(rgb, best_rgb)
    for name, reference in PALETTE[1:]:
        distance = _squared_distance(rgb, reference)
        if distance < best_distance:
            best_name, best_distance = name, distance
    return best_name
