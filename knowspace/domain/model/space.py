"""Space entity and navigation tree.

Spaces are hierarchical containers for content, nested at most
three levels deep. Level 1 spaces are roots; every deeper space has a
parent exactly one level above it.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional, Sequence

from pydantic import Field, model_validator

from knowspace.domain.model.common import Entity
from knowspace.domain.value import MAX_SPACE_LEVEL, SpaceId


class Space(Entity):
    """Space entity."""

    id: SpaceId
    name: str = Field(min_length=1, max_length=200)
    about: str = ""
    banner_url: Optional[str] = None
    level: int = Field(default=1, ge=1, le=MAX_SPACE_LEVEL)
    parent_id: Optional[SpaceId] = None

    @model_validator(mode="after")
    def check_parent_matches_level(self) -> "Space":
        """Level 1 spaces are roots; deeper spaces need a parent."""
        if self.level == 1 and self.parent_id is not None:
            raise ValueError("Level 1 spaces cannot have a parent")
        if self.level > 1 and self.parent_id is None:
            raise ValueError(f"Level {self.level} spaces require a parent")
        return self

    def check_parent(self, parent: Optional["Space"]) -> None:
        """Raise ValueError unless ``parent`` exists one level above this space."""
        if self.parent_id is None:
            return
        if parent is None or parent.id != self.parent_id:
            raise ValueError(f"Parent space {self.parent_id} does not exist")
        if parent.level != self.level - 1:
            raise ValueError(
                f"Level {self.level} spaces need a level {self.level - 1} parent, "
                f"got level {parent.level}"
            )


@dataclass(frozen=True)
class SpaceNode:
    """Node in the space navigation tree."""

    id: SpaceId
    name: str
    level: int
    children: list["SpaceNode"] = field(default_factory=list)


def assemble_space_tree(
    spaces: Sequence[Space], root_level: int = 1
) -> list[SpaceNode]:
    """Build the navigation forest from a flat list of spaces.

    Roots are the spaces at ``root_level``; children are attached under
    their parent down to ``MAX_SPACE_LEVEL``. Input order is kept among
    siblings.

    Args:
        spaces: Spaces in the order siblings should appear
        root_level: Level of the spaces returned at the top

    Returns:
        Ordered list of root nodes with nested children
    """
    children_by_parent: dict[SpaceId, list[Space]] = defaultdict(list)
    for space in spaces:
        if space.parent_id is not None:
            children_by_parent[space.parent_id].append(space)

    def build(space: Space) -> SpaceNode:
        children = (
            [build(child) for child in children_by_parent[space.id]]
            if space.level < MAX_SPACE_LEVEL
            else []
        )
        return SpaceNode(
            id=space.id, name=space.name, level=space.level, children=children
        )

    return [build(space) for space in spaces if space.level == root_level]
