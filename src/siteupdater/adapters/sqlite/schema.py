"""Database schema definitions for the SQLite option store.

Sites are the tenants of a network; every site owns a set of options and
every network owns a set of network-wide options. Option values are stored as
JSON text.
"""

from __future__ import annotations

CREATE_SITES_TABLE = """
CREATE TABLE IF NOT EXISTS sites (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    network_id INTEGER NOT NULL DEFAULT 1,
    domain TEXT NOT NULL,
    path TEXT NOT NULL DEFAULT '/',
    created_at DATETIME NOT NULL,
    UNIQUE(network_id, domain, path)
)
"""

CREATE_SITE_OPTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS site_options (
    site_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    value TEXT NOT NULL,
    PRIMARY KEY (site_id, name)
)
"""

CREATE_NETWORK_OPTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS network_options (
    network_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    value TEXT NOT NULL,
    PRIMARY KEY (network_id, name)
)
"""

CREATE_SITES_NETWORK_INDEX = """
CREATE INDEX IF NOT EXISTS idx_sites_network ON sites(network_id)
"""

ALL_TABLES = [
    CREATE_SITES_TABLE,
    CREATE_SITE_OPTIONS_TABLE,
    CREATE_NETWORK_OPTIONS_TABLE,
]

ALL_INDEXES = [
    CREATE_SITES_NETWORK_INDEX,
]
