"""
qa_forum/db/init_db.py
----------------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize the configured database:
    python -m qa_forum.db.init_db
"""

from qa_forum.db.backend import StorageBackend
from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)

TABLES = ("users", "questions", "replies", "question_follows", "question_likes")

SCHEMA_SQL = """
-- Users table: forum participants
CREATE TABLE IF NOT EXISTS users (
    id              {id_column},
    fname           TEXT NOT NULL,
    lname           TEXT NOT NULL
);

-- Questions table: each question has exactly one author
CREATE TABLE IF NOT EXISTS questions (
    id              {id_column},
    title           TEXT NOT NULL,
    body            TEXT NOT NULL,
    author_id       INTEGER NOT NULL REFERENCES users(id)
);

-- Replies table: parent_reply_id is NULL for top-level replies
CREATE TABLE IF NOT EXISTS replies (
    id              {id_column},
    body            TEXT NOT NULL,
    parent_reply_id INTEGER REFERENCES replies(id),
    author_id       INTEGER NOT NULL REFERENCES users(id),
    question_id     INTEGER NOT NULL REFERENCES questions(id)
);

-- Follow association: user watches question
CREATE TABLE IF NOT EXISTS question_follows (
    id              {id_column},
    user_id         INTEGER NOT NULL REFERENCES users(id),
    question_id     INTEGER NOT NULL REFERENCES questions(id)
);

-- Like association: user likes question
CREATE TABLE IF NOT EXISTS question_likes (
    id              {id_column},
    user_id         INTEGER NOT NULL REFERENCES users(id),
    question_id     INTEGER NOT NULL REFERENCES questions(id)
);

-- Indexes for the relationship lookups
CREATE INDEX IF NOT EXISTS idx_questions_author ON questions(author_id);
CREATE INDEX IF NOT EXISTS idx_replies_question ON replies(question_id);
CREATE INDEX IF NOT EXISTS idx_replies_parent ON replies(parent_reply_id);
CREATE INDEX IF NOT EXISTS idx_replies_author ON replies(author_id);
CREATE INDEX IF NOT EXISTS idx_follows_question ON question_follows(question_id);
CREATE INDEX IF NOT EXISTS idx_follows_user ON question_follows(user_id);
CREATE INDEX IF NOT EXISTS idx_likes_question ON question_likes(question_id);
CREATE INDEX IF NOT EXISTS idx_likes_user ON question_likes(user_id);
"""


def schema_for(backend: StorageBackend) -> str:
    """Render the schema DDL with the backend's identity column type."""
    return SCHEMA_SQL.format(id_column=backend.id_column_ddl)


def create_tables(backend: StorageBackend) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        backend.execute_script(schema_for(backend))
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from qa_forum.db.connection import close_backend, get_backend
    create_tables(get_backend())
    close_backend()
    print("Database schema created successfully.")
