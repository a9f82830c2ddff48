from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Asset(SQLModel, table=True):
    __tablename__ = "assets"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    original_name: Optional[str] = Field(default=None, max_length=255)
    mimetype: str = Field(max_length=255)
    size: int = 0
    owner_id: Optional[int] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=_utcnow)

    thumbnail: Optional["Thumbnail"] = Relationship(
        back_populates="asset",
        sa_relationship_kwargs={"uselist": False},
    )


class Thumbnail(SQLModel, table=True):
    __tablename__ = "thumbnails"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    gif: Optional[str] = Field(default=None, max_length=255)
    asset_id: int = Field(foreign_key="assets.id", unique=True)
    created_at: datetime = Field(default_factory=_utcnow)

    asset: Asset = Relationship(back_populates="thumbnail")
