from datetime import datetime

from sqlalchemy import BigInteger, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tunesearch.models.base import Base, TimestampedMixin, UTCDateTime


class SearchResult(Base, TimestampedMixin):
    __tablename__ = "search_results"
    __table_args__ = (Index("ix_search_results_search_date", "search_date"),)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    kind: Mapped[str] = mapped_column(String(80), nullable=False)
    artist_name: Mapped[str] = mapped_column(Text, nullable=False)
    collection_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    collection_view_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    search_date: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    def __repr__(self) -> str:
        return f"SearchResult(id={self.id!r}, kind={self.kind!r}, artist_name={self.artist_name!r})"
