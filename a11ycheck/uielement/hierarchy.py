"""
Read-only snapshot of a captured UI element tree.

Snapshots are produced elsewhere (by whatever captured the live UI) and arrive
here either as `ViewHierarchyElement` values or as plain dictionaries loaded from
storage. Checks only read from a snapshot; nothing in this package mutates one.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from typing import Iterable
from typing import Mapping

logger = logging.getLogger(__name__)


class HierarchyValidationError(ValueError):
    """Raised when a set of elements does not form a single well-formed tree."""

    pass


class ElementNotFoundError(LookupError):
    """Raised when an element id is not part of the snapshot."""

    def __init__(self, element_id: int):
        super().__init__(f"No element with id {element_id} in the hierarchy")
        self.element_id = element_id


@dataclass(frozen=True)
class ViewHierarchyElement:
    """A single node of a captured UI tree."""

    id: int
    """Identifier of the node, unique within its snapshot."""
    class_name: str | None = None
    """The accessibility class name reported for the node. None when it could not be captured."""
    important_for_accessibility: bool = True
    """Whether accessibility services consider the node."""
    visible_to_user: bool | None = True
    """Whether the node was visible at capture time. None when unknown."""
    parent_id: int | None = None
    child_ids: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ViewHierarchyElement":
        return cls(
            id=int(data["id"]),
            class_name=data.get("class_name"),
            important_for_accessibility=bool(
                data.get("important_for_accessibility", True)
            ),
            visible_to_user=data.get("visible_to_user", True),
            parent_id=data.get("parent_id"),
            child_ids=tuple(data.get("child_ids", ())),
        )


class AccessibilityHierarchy:
    """
    An immutable tree of `ViewHierarchyElement` values with exactly one root.

    Elements are kept in capture order. Lookups are by element id, which is how
    results refer back to the node they concern.
    """

    def __init__(self, elements: Iterable[ViewHierarchyElement]):
        by_id: dict[int, ViewHierarchyElement] = {}
        for element in elements:
            if element.id in by_id:
                raise HierarchyValidationError(
                    f"Duplicate element id {element.id} in hierarchy"
                )
            by_id[element.id] = element

        if not by_id:
            raise HierarchyValidationError("A hierarchy needs at least one element")

        roots = [element for element in by_id.values() if element.parent_id is None]
        if len(roots) != 1:
            raise HierarchyValidationError(
                f"Expected exactly one root element, found {len(roots)}"
            )

        for element in by_id.values():
            if element.parent_id is not None and element.parent_id not in by_id:
                raise HierarchyValidationError(
                    f"Element {element.id} references unknown parent {element.parent_id}"
                )
            for child_id in element.child_ids:
                child = by_id.get(child_id)
                if child is None:
                    raise HierarchyValidationError(
                        f"Element {element.id} references unknown child {child_id}"
                    )
                if child.parent_id != element.id:
                    raise HierarchyValidationError(
                        f"Element {child_id} is listed as a child of {element.id} "
                        f"but declares parent {child.parent_id}"
                    )

        # Every element must hang off the root exactly once
        seen: set[int] = set()
        stack = [roots[0].id]
        while stack:
            element_id = stack.pop()
            if element_id in seen:
                raise HierarchyValidationError(
                    f"Element {element_id} is listed more than once as a child"
                )
            seen.add(element_id)
            stack.extend(by_id[element_id].child_ids)
        unreachable = sorted(by_id.keys() - seen)
        if unreachable:
            raise HierarchyValidationError(
                f"Elements not reachable from the root: {unreachable}"
            )

        self._elements = MappingProxyType(by_id)
        self._root = roots[0]
        logger.debug("Loaded hierarchy with %d elements", len(by_id))

    @classmethod
    def from_dicts(cls, rows: Iterable[Mapping[str, Any]]) -> "AccessibilityHierarchy":
        """Build a snapshot from plain dictionaries, e.g. a stored capture."""
        return cls(ViewHierarchyElement.from_dict(row) for row in rows)

    @property
    def root(self) -> ViewHierarchyElement:
        return self._root

    @property
    def elements(self) -> tuple[ViewHierarchyElement, ...]:
        return tuple(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def get_element(self, element_id: int) -> ViewHierarchyElement:
        element = self._elements.get(element_id)
        if element is None:
            raise ElementNotFoundError(element_id)
        return element

    def get_element_by_id(self, element_id: int) -> ViewHierarchyElement | None:
        return self._elements.get(element_id)

    def get_elements_to_evaluate(
        self, from_root: ViewHierarchyElement | None = None
    ) -> list[ViewHierarchyElement]:
        """
        Return the nodes a check should examine, in pre-order.

        :param from_root: The subtree to walk. Defaults to the whole hierarchy.
        :return: The subtree root followed by its descendants, depth first, children in declared order.
        """
        start = self._root if from_root is None else self.get_element(from_root.id)
        ordered: list[ViewHierarchyElement] = []
        stack = [start]
        while stack:
            element = stack.pop()
            ordered.append(element)
            stack.extend(
                self._elements[child_id] for child_id in reversed(element.child_ids)
            )
        return ordered
