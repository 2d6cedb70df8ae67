from dataclasses import dataclass
DEFAULT_DURATION = 1
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
@dataclass(frozen=True)
class LayoutConfig:
    node_width: float = 120
    node_height: float = 80
    node_spacing: float = 200
    level_spacing: float = 150
