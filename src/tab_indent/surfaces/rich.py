"""Rich editable regions: a tree of elements and text fragments.

A region's selection is a pair of boundary points, each a container node
plus an offset. Inside a :class:`TextFragment` the offset counts characters;
inside an :class:`Element` it counts children. Lines are only ever split on
literal ``"\\n"`` characters in fragment text; element structure carries no
line meaning.

Indenting a selection flattens it: the selected content is pulled out as
plain text and put back as a single fragment, so any markup that was inside
the selection is lost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from tab_indent.engine import EditOutcome, SelectionRange
from tab_indent.engine.validation import SelectionError

from .base import SurfaceAdapter, SurfaceState


class Node:
    parent: Optional["Element"] = None

    def text_content(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def root(self) -> "Node":
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return node


class TextFragment(Node):
    """Leaf holding a run of text."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.parent = None

    def text_content(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"TextFragment({self.text!r})"


class Element(Node):
    """Container node; plain strings passed as children become fragments."""

    def __init__(self, tag: str, *children: Union[Node, str]) -> None:
        self.tag = tag
        self.parent = None
        self.children: List[Node] = []
        for child in children:
            self.append(child)

    def append(self, child: Union[Node, str]) -> Node:
        return self.insert(len(self.children), child)

    def insert(self, index: int, child: Union[Node, str]) -> Node:
        node = TextFragment(child) if isinstance(child, str) else child
        if node.parent is not None:
            node.parent.children.remove(node)
        node.parent = self
        self.children.insert(index, node)
        return node

    def index(self, child: Node) -> int:
        for position, current in enumerate(self.children):
            if current is child:
                return position
        raise ValueError(f"{child!r} is not a child of <{self.tag}>")

    def text_content(self) -> str:
        return "".join(child.text_content() for child in self.children)

    def iter_fragments(self) -> Iterator[TextFragment]:
        for child in self.children:
            if isinstance(child, TextFragment):
                yield child
            elif isinstance(child, Element):
                yield from child.iter_fragments()

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, {len(self.children)} children)"


@dataclass(frozen=True, slots=True)
class Boundary:
    node: Node
    offset: int


@dataclass(frozen=True, slots=True)
class RegionRange:
    start: Boundary
    end: Boundary

    @property
    def collapsed(self) -> bool:
        return self.start.node is self.end.node and self.start.offset == self.end.offset


class RichRegion:
    """An editable tree rooted at ``root`` with at most one selection range."""

    def __init__(self, root: Element, *, editable: bool = True) -> None:
        self.root = root
        self.editable = editable
        self.selection: Optional[RegionRange] = None

    @classmethod
    def from_text(cls, text: str, *, tag: str = "div") -> "RichRegion":
        return cls(Element(tag, text))

    def text_content(self) -> str:
        return self.root.text_content()

    # -- selection -----------------------------------------------------

    def select(
        self,
        start_node: Node,
        start_offset: int,
        end_node: Optional[Node] = None,
        end_offset: Optional[int] = None,
    ) -> RegionRange:
        """Set the selection; a backwards anchor/focus pair is reordered."""

        start = self._boundary(start_node, start_offset)
        end = self._boundary(
            start_node if end_node is None else end_node,
            start_offset if end_offset is None else end_offset,
        )
        if self.offset_of(end) < self.offset_of(start):
            start, end = end, start
        self.selection = RegionRange(start, end)
        return self.selection

    def collapse(self, node: Node, offset: int) -> RegionRange:
        return self.select(node, offset)

    def clear_selection(self) -> None:
        self.selection = None

    def selection_offsets(self) -> Optional[SelectionRange]:
        """Selection expressed as offsets into :meth:`text_content`."""

        if self.selection is None:
            return None
        return SelectionRange(
            self.offset_of(self.selection.start), self.offset_of(self.selection.end)
        )

    def offset_of(self, boundary: Boundary) -> int:
        node, offset = boundary.node, boundary.offset
        if isinstance(node, Element):
            position = sum(len(child.text_content()) for child in node.children[:offset])
        else:
            position = offset
        while node.parent is not None:
            parent = node.parent
            for sibling in parent.children:
                if sibling is node:
                    break
                position += len(sibling.text_content())
            node = parent
        return position

    def _boundary(self, node: Node, offset: int) -> Boundary:
        if node.root() is not self.root:
            raise SelectionError(f"{node!r} is not part of this region")
        if isinstance(node, TextFragment):
            limit = len(node.text)
        elif isinstance(node, Element):
            limit = len(node.children)
        else:
            raise SelectionError(f"{node!r} cannot hold a boundary point")
        if not 0 <= offset <= limit:
            raise SelectionError(
                f"Offset {offset} is outside {node!r} (0..{limit})", start=offset
            )
        return Boundary(node, offset)

    def _require_selection(self) -> RegionRange:
        if self.selection is None:
            raise SelectionError("Region has no selection")
        return self.selection

    # -- mutation ------------------------------------------------------

    def set_fragment_text(self, fragment: TextFragment, text: str) -> None:
        if fragment.root() is not self.root:
            raise SelectionError(f"{fragment!r} is not part of this region")
        fragment.text = text

    def extract_selection_content(self) -> str:
        """Cut the selected text out of the tree and return it flattened.

        Fragments emptied by the cut stay in place. The selection collapses
        to its start.
        """

        selection = self._require_selection()
        first = self.offset_of(selection.start)
        last = self.offset_of(selection.end)
        pieces: List[str] = []
        # Spans are measured on the uncut tree.
        for fragment, span_start, span_end in list(self._fragment_spans()):
            low, high = max(span_start, first), min(span_end, last)
            if low >= high:
                continue
            cut_from, cut_to = low - span_start, high - span_start
            pieces.append(fragment.text[cut_from:cut_to])
            fragment.text = fragment.text[:cut_from] + fragment.text[cut_to:]
        self.selection = RegionRange(selection.start, selection.start)
        return "".join(pieces)

    def insert_text_at_cursor(self, text: str) -> RegionRange:
        """Insert ``text`` at the selection start and put the caret after it."""

        boundary = self._require_selection().start
        node, offset = boundary.node, boundary.offset
        if isinstance(node, TextFragment):
            node.text = node.text[:offset] + text + node.text[offset:]
            return self.collapse(node, offset + len(text))
        assert isinstance(node, Element)
        fragment = node.insert(offset, TextFragment(text))
        return self.collapse(fragment, len(text))

    def replace_selection_with(self, fragment: TextFragment) -> RegionRange:
        """Swap the selected content for ``fragment`` and select all of it."""

        if not self._require_selection().collapsed:
            self.extract_selection_content()
        boundary = self._require_selection().start
        node, offset = boundary.node, boundary.offset
        if isinstance(node, TextFragment):
            parent = node.parent
            assert parent is not None
            position = parent.index(node)
            tail = node.text[offset:]
            node.text = node.text[:offset]
            parent.insert(position + 1, fragment)
            if tail:
                parent.insert(position + 2, TextFragment(tail))
        else:
            assert isinstance(node, Element)
            node.insert(offset, fragment)
        return self.select(fragment, 0, fragment, len(fragment.text))

    def _fragment_spans(self) -> Iterator[Tuple[TextFragment, int, int]]:
        position = 0
        for fragment in self.root.iter_fragments():
            yield fragment, position, position + len(fragment.text)
            position += len(fragment.text)


@dataclass(slots=True)
class RichState(SurfaceState):
    """Surface state plus where the text came from inside the region."""

    fragment: Optional[TextFragment] = None
    extracted: bool = False


class RichRegionAdapter(SurfaceAdapter):
    """Runs the engine over a :class:`RichRegion`.

    A caret is handled inside its own fragment, so a line that starts in an
    earlier fragment is not seen by dedent. A selection is extracted when the
    state is read, which mutates the region before the commit puts the
    result back.
    """

    kind = "rich"

    def __init__(self, surface: RichRegion) -> None:
        super().__init__(surface)

    def extract_state(self) -> Optional[SurfaceState]:
        selection = self.surface.selection
        if selection is None:
            return None
        if selection.collapsed:
            node, offset = selection.start.node, selection.start.offset
            if isinstance(node, TextFragment):
                return RichState(
                    text=node.text,
                    selection=SelectionRange.caret(offset),
                    fragment=node,
                )
            return RichState(text="", selection=SelectionRange.caret(0))
        text = self.surface.extract_selection_content()
        return RichState(
            text=text, selection=SelectionRange(0, len(text)), extracted=True
        )

    def commit_state(self, state: SurfaceState, outcome: EditOutcome) -> None:
        assert isinstance(state, RichState)
        region: RichRegion = self.surface
        if state.extracted:
            region.replace_selection_with(TextFragment(outcome.text))
            return
        if not outcome.changed_from(state.text):
            return
        if len(outcome.text) > len(state.text):
            caret = state.selection.start
            region.insert_text_at_cursor(outcome.text[caret : outcome.selection.start])
            return
        assert state.fragment is not None
        region.set_fragment_text(state.fragment, outcome.text)
        region.collapse(state.fragment, outcome.selection.start)


__all__ = [
    "Boundary",
    "Element",
    "Node",
    "RegionRange",
    "RichRegion",
    "RichRegionAdapter",
    "RichState",
    "TextFragment",
]
