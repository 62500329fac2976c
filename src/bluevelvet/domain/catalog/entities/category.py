"""Category entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from bluevelvet.domain.catalog.exceptions import InvalidCategoryError
from bluevelvet.domain.shared.time import utc_now

NAME_MAX_LENGTH = 255


def _validated_name(name: str) -> str:
    if name is None or not name.strip():
        msg = "Category name cannot be empty"
        raise InvalidCategoryError(msg)
    name = name.strip()
    if len(name) > NAME_MAX_LENGTH:
        msg = f"Category name cannot exceed {NAME_MAX_LENGTH} characters"
        raise InvalidCategoryError(msg)
    return name


class Category:
    """
    A product category of the music store.

    Hierarchy:
    - A category optionally references one parent by id
    - Children are never held in memory; they are looked up on demand
      through the repository (one level only)
    - The parent name is a read-only projection filled in by the repository
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        image: Optional[str] = None,
        enabled: bool = True,
        parent_id: Optional[UUID] = None,
        id: Optional[UUID] = None,
        parent_name: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = _validated_name(name)
        self._image = image
        self._enabled = enabled
        self._parent_id = parent_id
        self._parent_name = parent_name
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        image: Optional[str],
        enabled: bool,
        parent_id: Optional[UUID],
        created_at: datetime,
        updated_at: datetime,
        parent_name: Optional[str] = None,
    ) -> "Category":
        return cls(
            id=id,
            name=name,
            image=image,
            enabled=enabled,
            parent_id=parent_id,
            parent_name=parent_name,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def image(self) -> Optional[str]:
        return self._image

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def parent_id(self) -> Optional[UUID]:
        return self._parent_id

    @property
    def parent_name(self) -> Optional[str]:
        return self._parent_name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_root(self) -> bool:
        return self._parent_id is None

    def rename(self, new_name: str) -> None:
        self._name = _validated_name(new_name)
        self._touch()

    def set_parent(self, parent: "Category") -> None:
        """Attach this category below ``parent``.

        Only one level is checked: ``parent`` may not be this category or one
        of its direct children. The hierarchy is never read deeper.
        """
        if parent.id == self._id:
            msg = "Category cannot be its own parent"
            raise InvalidCategoryError(msg)
        if parent.parent_id == self._id:
            msg = "Category cannot be moved below its own subcategory"
            raise InvalidCategoryError(msg)
        self._parent_id = parent.id
        self._parent_name = parent.name
        self._touch()

    def make_root(self) -> None:
        self._parent_id = None
        self._parent_name = None
        self._touch()

    def enable(self) -> None:
        self._enabled = True
        self._touch()

    def disable(self) -> None:
        self._enabled = False
        self._touch()

    def set_enabled(self, enabled: bool) -> None:
        if enabled:
            self.enable()
        else:
            self.disable()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Category(id={self._id}, name={self._name!r}, parent_id={self._parent_id})"
