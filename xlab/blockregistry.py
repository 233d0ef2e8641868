"""Catalogue of the block types available to diagrams."""

from __future__ import annotations

from typing import Mapping

from xlab.diagramitem import DiagramType

_RT_SECTION = "Real-Time"
_NRT_SECTION = "Non Real-Time"

_SHAPES = {"t": DiagramType.TRIANGLE, "s": DiagramType.SQUARE}


class BlockRegistry:
    """Maps each block type to its real-time flag, button id and shape."""

    def __init__(self) -> None:
        self._rt: dict[str, bool] = {}
        self._index: dict[str, int] = {}
        self._diag: dict[str, DiagramType] = {}
        self._next_index = 0

    def register_block(
        self, block_type: str, real_time: bool, diagram_type: DiagramType
    ) -> None:
        """Record a block type; each registration takes the next id."""
        self._rt[block_type] = real_time
        self._index[block_type] = self._next_index
        self._diag[block_type] = diagram_type
        self._next_index += 1

    def _register_from_entry(self, key: str, value: str, real_time: bool) -> None:
        shape = _SHAPES.get(value[:1].lower())
        if shape is not None:
            self.register_block(key, real_time, shape)

    def register_rt(self, key: str, value: str) -> None:
        """Register a real-time type; ``value`` starting with t/s picks the shape."""
        self._register_from_entry(key, value, True)

    def register_nrt(self, key: str, value: str) -> None:
        """Register a non real-time type; ``value`` starting with t/s picks the shape."""
        self._register_from_entry(key, value, False)

    def load(self, sections: Mapping[str, Mapping[str, str]]) -> None:
        """Register the entries of the real-time and non real-time sections."""
        for key, value in sections.get(_RT_SECTION, {}).items():
            self.register_rt(key, value)
        for key, value in sections.get(_NRT_SECTION, {}).items():
            self.register_nrt(key, value)

    def is_real_time(self, block_type: str) -> bool:
        return self._rt.get(block_type, False)

    def type_of_id(self, block_id: int) -> str:
        """Return the type holding ``block_id``, or an empty string."""
        for block_type, index in self._index.items():
            if index == block_id:
                return block_type
        return ""

    def id_of(self, block_type: str) -> int:
        return self._index.get(block_type, 0)

    def diag_of(self, block_type: str) -> DiagramType:
        return self._diag.get(block_type, DiagramType.STEP)

    def all_rt(self) -> list[str]:
        """Real-time block types, in registration order."""
        return [t for t, rt in self._rt.items() if rt]

    def all_nrt(self) -> list[str]:
        """Non real-time block types, in registration order."""
        return [t for t, rt in self._rt.items() if not rt]