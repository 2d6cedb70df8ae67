"""Node coordinates for network diagrams, keyed by task id.

Levels run along the main axis; tasks sharing a level are centred on the cross axis.
Only coordinates are produced here; drawing belongs to the caller.
"""
import math
from typing import Dict, Optional, Tuple
from .config import LayoutConfig
from .model import ScheduleResult

LAYOUTS = ('hierarchical', 'radial', 'grid')
ORIENTATIONS = ('TB', 'BT', 'LR', 'RL')

def node_positions(result: ScheduleResult, layout: str = 'hierarchical', orientation: str = 'TB',
                   config: Optional[LayoutConfig] = None) -> Dict[str, Tuple[float, float]]:
    if layout not in LAYOUTS: raise ValueError(f"unknown layout {layout!r}, expected one of {LAYOUTS}")
    if orientation not in ORIENTATIONS: raise ValueError(f"unknown orientation {orientation!r}, expected one of {ORIENTATIONS}")
    cfg = config or LayoutConfig(); pos = {}
    if layout == 'grid':
        ordered = [tid for ids in result.levels.values() for tid in ids]
        cols = math.ceil(math.sqrt(len(ordered))) if ordered else 1
        for i, tid in enumerate(ordered):
            pos[tid] = ((i % cols) * cfg.node_spacing, (i // cols) * cfg.level_spacing)
        return pos
    for level, ids in result.levels.items():
        n = len(ids)
        for i, tid in enumerate(ids):
            if layout == 'radial':
                angle = i / n * 2 * math.pi; r = level * cfg.level_spacing
                pos[tid] = (math.cos(angle) * r, math.sin(angle) * r); continue
            cross = i * cfg.node_spacing - (n - 1) * cfg.node_spacing / 2
            main = level * cfg.level_spacing
            if orientation in ('TB', 'BT'): pos[tid] = (cross, -main if orientation == 'BT' else main)
            else: pos[tid] = (-main if orientation == 'RL' else main, cross)
    return pos

def bounds(positions: Dict[str, Tuple[float, float]], config: Optional[LayoutConfig] = None):
    """(min_x, max_x, min_y, max_y) of the node boxes, all zero when there are no nodes."""
    if not positions: return (0, 0, 0, 0)
    cfg = config or LayoutConfig()
    xs = [p[0] for p in positions.values()]; ys = [p[1] for p in positions.values()]
    return (min(xs) - cfg.node_width / 2, max(xs) + cfg.node_width / 2,
            min(ys) - cfg.node_height / 2, max(ys) + cfg.node_height / 2)
