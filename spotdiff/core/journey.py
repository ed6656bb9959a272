from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from spotdiff.core.levels import (
    LEVELS_PER_SECTION,
    MAX_LEVEL,
    MIN_LEVEL,
    SECTION_COUNT,
    section_index,
    section_levels,
)

DEFAULT_MAP_PATH = Path(__file__).resolve().parent.parent / "data" / "journey.yaml"


@dataclass(frozen=True)
class MapNode:
    level: int
    x: int
    y: int


@dataclass(frozen=True)
class MapSection:
    index: int
    title: str
    nodes: Tuple[MapNode, ...]

    @property
    def levels(self) -> List[int]:
        return [node.level for node in self.nodes]


class JourneyMap:
    """Level nodes and section titles for the journey map screen."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or DEFAULT_MAP_PATH
        self._canvas, self._sections = self._load()
        self._nodes: Dict[int, MapNode] = {
            node.level: node for section in self._sections for node in section.nodes
        }

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self._canvas

    def sections(self) -> List[MapSection]:
        return list(self._sections)

    def section_for(self, level: int) -> MapSection:
        return self._sections[section_index(level)]

    def node(self, level: int) -> MapNode:
        return self._nodes[level]

    def nodes(self) -> List[MapNode]:
        return [self._nodes[level] for level in range(MIN_LEVEL, MAX_LEVEL + 1)]

    def _load(self) -> Tuple[Tuple[int, int], List[MapSection]]:
        if not self._path.exists():
            raise FileNotFoundError(f"Journey map not found: {self._path}")
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with 'canvas' and 'sections'")

        canvas = raw.get("canvas") or {}
        try:
            size = (int(canvas["width"]), int(canvas["height"]))
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"{self._path.name}: missing or invalid 'canvas'") from None

        raw_sections = raw.get("sections")
        if not isinstance(raw_sections, list) or len(raw_sections) != SECTION_COUNT:
            raise ValueError(f"{self._path.name}: expected {SECTION_COUNT} sections")

        sections: List[MapSection] = []
        for index, item in enumerate(raw_sections):
            title = item.get("title") if isinstance(item, dict) else None
            if not title or not isinstance(title, str):
                raise ValueError(f"{self._path.name}: section {index + 1} missing 'title'")
            nodes = tuple(self._parse_node(entry) for entry in item.get("levels") or [])
            if [n.level for n in nodes] != list(section_levels(index)):
                raise ValueError(
                    f"{self._path.name}: section '{title}' must list levels "
                    f"{index * LEVELS_PER_SECTION + 1}-{(index + 1) * LEVELS_PER_SECTION} in order"
                )
            sections.append(MapSection(index=index, title=title.strip(), nodes=nodes))
        return size, sections

    def _parse_node(self, entry: object) -> MapNode:
        if not isinstance(entry, dict):
            raise ValueError(f"{self._path.name}: level entry must be a mapping, got {entry!r}")
        try:
            return MapNode(level=int(entry["level"]), x=int(entry["x"]), y=int(entry["y"]))
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"{self._path.name}: invalid level entry {entry!r}") from None
