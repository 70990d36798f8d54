"""
SQLite storage of conjugation tables for Katsuyo.

Saved tables double as a reverse index: a conjugated surface form can be
looked up to find the dictionary verbs and categories that produce it.

Usage:
    with session_scope(path) as session:
        save_table(session, ConjugationTable.from_verb(verb))
        matches = lookup_surface(session, "たべさせられる")
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from sqlalchemy import ForeignKey, Integer, String, create_engine, delete, or_, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship, sessionmaker

from katsuyo.models import ConjugationTable
from katsuyo.settings import DB_PATH, ensure_data_dirs

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class VerbEntry(Base):
    """A dictionary-form verb whose table has been saved."""
    __tablename__ = "verb"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    kana: Mapped[str] = mapped_column(String, index=True)
    kanji: Mapped[Optional[str]] = mapped_column(String, nullable=True, index=True)
    verb_type: Mapped[str] = mapped_column(String)

    conjugations: Mapped[List["ConjugatedEntry"]] = relationship(
        back_populates="verb", cascade="all, delete-orphan", order_by="ConjugatedEntry.id"
    )

    def __repr__(self) -> str:
        return f"<VerbEntry {self.kanji or self.kana} ({self.verb_type})>"


class ConjugatedEntry(Base):
    """One conjugated form of a saved verb."""
    __tablename__ = "conjugation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    verb_id: Mapped[int] = mapped_column(ForeignKey("verb.id", ondelete="CASCADE"), index=True)
    conj_type: Mapped[int] = mapped_column(Integer)
    form: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    kana: Mapped[str] = mapped_column(String, index=True)
    kanji: Mapped[Optional[str]] = mapped_column(String, nullable=True, index=True)

    verb: Mapped[VerbEntry] = relationship(back_populates="conjugations")

    def __repr__(self) -> str:
        return f"<ConjugatedEntry {self.kanji or self.kana} conj={self.conj_type} form={self.form}>"


# ============================================================================
# Connection Handling
# ============================================================================

def get_engine(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Create an engine for the SQLite database at ``db_path``.

    Args:
        db_path: Database file, ':memory:' for an in-memory database.
            Defaults to settings.DB_PATH.
    """
    if db_path is None:
        ensure_data_dirs()
        db_path = DB_PATH

    if str(db_path) == ":memory:":
        return create_engine("sqlite://")

    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}")


def init_db(engine: Engine) -> None:
    """Create the tables if they don't exist."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(db_path: Optional[Union[str, Path]] = None) -> Iterator[Session]:
    """
    Transactional session around a block.

    Commits on success, rolls back on any exception and re-raises it.
    """
    engine = get_engine(db_path)
    init_db(engine)
    session = sessionmaker(bind=engine)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        engine.dispose()


# ============================================================================
# Queries
# ============================================================================

def save_table(session: Session, table: ConjugationTable) -> VerbEntry:
    """
    Save a conjugation table, replacing any earlier table of the same verb.

    Returns:
        The VerbEntry holding the table.
    """
    entry = session.scalars(
        select(VerbEntry).where(
            VerbEntry.kana == table.kana,
            VerbEntry.kanji.is_(None) if table.kanji is None else VerbEntry.kanji == table.kanji,
            VerbEntry.verb_type == table.verb_type,
        )
    ).first()

    if entry is None:
        entry = VerbEntry(kana=table.kana, kanji=table.kanji, verb_type=table.verb_type)
        session.add(entry)
        session.flush()
    else:
        logger.info(f"Replacing saved conjugations of {table.kana}")
        session.execute(delete(ConjugatedEntry).where(ConjugatedEntry.verb_id == entry.id))
        session.expire(entry, ["conjugations"])

    for form in table.forms:
        session.add(ConjugatedEntry(
            verb_id=entry.id,
            conj_type=form.conj_id,
            form=form.form,
            kana=form.kana,
            kanji=form.kanji,
        ))
    session.flush()

    logger.info(f"Saved {len(table.forms)} conjugations of {table.kana}")
    return entry


def find_forms(session: Session, kana: str, kanji: Optional[str] = None) -> List[ConjugatedEntry]:
    """Saved conjugations of the verb with the given dictionary readings."""
    query = select(ConjugatedEntry).join(VerbEntry).where(VerbEntry.kana == kana)
    if kanji is not None:
        query = query.where(VerbEntry.kanji == kanji)
    return list(session.scalars(query.order_by(ConjugatedEntry.id)))


def lookup_surface(session: Session, text: str) -> List[Tuple[VerbEntry, ConjugatedEntry]]:
    """
    Find the saved verbs and categories that produce ``text``.

    ``text`` is matched against both the kana and the kanji reading.
    """
    query = (
        select(VerbEntry, ConjugatedEntry)
        .join(ConjugatedEntry, ConjugatedEntry.verb_id == VerbEntry.id)
        .where(or_(ConjugatedEntry.kana == text, ConjugatedEntry.kanji == text))
        .order_by(VerbEntry.id, ConjugatedEntry.id)
    )
    return [(verb, conj) for verb, conj in session.execute(query)]
