"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base


class User(Base):
    """Owner of flashcards and study sessions."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class Flashcard(Base):
    """Flashcard content plus its spaced repetition schedule."""

    __tablename__ = "flashcards"
    __table_args__ = (
        CheckConstraint("interval_days >= 0", name="ck_flashcards_interval_non_negative"),
        CheckConstraint("repetitions >= 0", name="ck_flashcards_repetitions_non_negative"),
        CheckConstraint(
            "ease_factor >= 1.3 AND ease_factor <= 2.5", name="ck_flashcards_ease_factor_range"
        ),
        Index("ix_flashcards_user_due", "user_id", "due_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str | None] = mapped_column(String(500), nullable=True)

    interval_days: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    ease_factor: Mapped[float] = mapped_column(Float, nullable=False, default=2.5)
    repetitions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    due_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Flashcard(id={self.id}, user_id={self.user_id}, due_at={self.due_at})>"


class StudySession(Base):
    """One sitting of flashcard review."""

    __tablename__ = "study_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    deck: Mapped[list["StudySessionFlashcard"]] = relationship(
        back_populates="session",
        order_by="StudySessionFlashcard.position",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<StudySession(id={self.id}, user_id={self.user_id})>"


class StudySessionFlashcard(Base):
    """
    Position of a flashcard in a session's deck.

    flashcard_id is not a foreign key: the deck stays readable after a card
    is deleted.
    """

    __tablename__ = "study_session_flashcards"
    __table_args__ = (
        UniqueConstraint("session_id", "flashcard_id", name="uq_session_flashcard"),
        UniqueConstraint("session_id", "position", name="uq_session_position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("study_sessions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    flashcard_id: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    session: Mapped[StudySession] = relationship(back_populates="deck")


class SessionItem(Base):
    """A rating given to a flashcard during a session."""

    __tablename__ = "session_items"
    __table_args__ = (
        CheckConstraint("rating IN (-1, 0, 1)", name="ck_session_items_rating"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("study_sessions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    flashcard_id: Mapped[int] = mapped_column(
        ForeignKey("flashcards.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<SessionItem(id={self.id}, session_id={self.session_id}, rating={self.rating})>"
