"""SQLite database schema definition."""

import sqlite3
from pathlib import Path

SCHEMA_VERSION = 1

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS import_batches (
    id TEXT PRIMARY KEY,
    source TEXT NOT NULL,
    file_path TEXT NOT NULL,
    imported_at TEXT NOT NULL DEFAULT (datetime('now')),
    record_count INTEGER NOT NULL DEFAULT 0,
    status TEXT NOT NULL DEFAULT 'pending'
);

CREATE TABLE IF NOT EXISTS events (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    event_date TEXT,
    event_time TEXT,
    location TEXT,
    description TEXT,
    status TEXT
);

CREATE TABLE IF NOT EXISTS projects (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    manager TEXT,
    status TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS tasks (
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    id TEXT NOT NULL,
    position INTEGER NOT NULL,
    title TEXT NOT NULL,
    due_date TEXT,
    status TEXT,
    priority TEXT,
    PRIMARY KEY (project_id, id)
);

CREATE TABLE IF NOT EXISTS legal_cases (
    id TEXT PRIMARY KEY,
    case_number TEXT,
    subject TEXT NOT NULL,
    client TEXT NOT NULL,
    status TEXT
);

CREATE TABLE IF NOT EXISTS hearings (
    case_id TEXT NOT NULL REFERENCES legal_cases(id) ON DELETE CASCADE,
    id TEXT NOT NULL,
    position INTEGER NOT NULL,
    hearing_date TEXT,
    hearing_time TEXT,
    description TEXT,
    PRIMARY KEY (case_id, id)
);

CREATE TABLE IF NOT EXISTS cash_payments (
    id TEXT PRIMARY KEY,
    person_name TEXT NOT NULL DEFAULT '',
    purpose TEXT NOT NULL,
    amount TEXT NOT NULL,
    currency TEXT NOT NULL DEFAULT 'TRY',
    description TEXT NOT NULL DEFAULT '',
    payment_date TEXT NOT NULL,
    status TEXT
);

CREATE TABLE IF NOT EXISTS in_kind_transactions (
    id TEXT PRIMARY KEY,
    person_id TEXT NOT NULL,
    product_id TEXT NOT NULL,
    quantity TEXT NOT NULL,
    unit TEXT NOT NULL,
    transaction_date TEXT NOT NULL,
    notes TEXT
);

CREATE TABLE IF NOT EXISTS products (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    unit TEXT,
    category TEXT
);

CREATE TABLE IF NOT EXISTS people (
    id TEXT PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL DEFAULT '',
    nationalities TEXT,
    latitude REAL,
    longitude REAL,
    aid_types_received TEXT,
    membership_type TEXT,
    registration_date TEXT
);

CREATE TABLE IF NOT EXISTS financial_records (
    id TEXT PRIMARY KEY,
    record_date TEXT NOT NULL,
    direction TEXT NOT NULL,
    category TEXT,
    amount TEXT NOT NULL,
    description TEXT
);

CREATE TABLE IF NOT EXISTS messages (
    id TEXT PRIMARY KEY,
    channel TEXT NOT NULL,
    audience TEXT NOT NULL,
    recipient_count INTEGER NOT NULL DEFAULT 0,
    title TEXT,
    sent_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS aid_applications (
    id TEXT PRIMARY KEY,
    applicant_id TEXT NOT NULL,
    status TEXT NOT NULL,
    requested_amount TEXT,
    applied_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS donations (
    id TEXT PRIMARY KEY,
    donor_id TEXT NOT NULL,
    amount TEXT NOT NULL,
    currency TEXT NOT NULL DEFAULT 'TRY',
    donation_date TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS charity_boxes (
    id TEXT PRIMARY KEY,
    code TEXT NOT NULL,
    location TEXT NOT NULL DEFAULT '',
    latitude REAL,
    longitude REAL,
    status TEXT
);
"""


def create_schema(db_path: Path) -> sqlite3.Connection:
    """Create the database schema. Returns the connection.

    The connection may be shared with the screen loader's fetch threads; the
    repository serializes access to it.
    """
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.executescript(SCHEMA_SQL)
    conn.execute(
        "INSERT OR IGNORE INTO schema_version (version) VALUES (?)",
        (SCHEMA_VERSION,),
    )
    conn.commit()
    return conn
