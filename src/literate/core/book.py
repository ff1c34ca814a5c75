"""Domain entities for books in the library."""

import uuid
from dataclasses import dataclass, field
from typing import Optional


def new_book_id() -> str:
    """Generate a fresh opaque book identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class BookLocation:
    """Geographic coordinate attached to a book.

    Latitude is expected in [-90, 90] and longitude in [-180, 180].
    Values are not validated here; callers supply sane coordinates.
    """

    latitude: float
    longitude: float


@dataclass
class Book:
    """A single catalog entry.

    Attributes:
        title: Display title.
        author: Author line as shown in the list.
        description: Free-text blurb shown in the detail panel.
        is_favorite: Whether the user flagged the book as a favorite.
        is_read: Whether the user marked the book as read.
        cover_image_name: Asset name of the cover, resolved by a CoverResolver.
        location: Where the book is, if known. Books without one are not mapped.
        id: Opaque identifier, unique within a BookStore.
    """

    title: str
    author: str
    description: str = ""
    is_favorite: bool = False
    is_read: bool = False
    cover_image_name: Optional[str] = None
    location: Optional[BookLocation] = None
    id: str = field(default_factory=new_book_id)

    @property
    def has_location(self) -> bool:
        return self.location is not None
