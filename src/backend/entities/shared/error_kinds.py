"""Classification of database failures.

Pure functions that map a driver error message to a coarse error kind so
callers can react to, say, a duplicate email without parsing messages.
"""

from models import ErrorKind

# ── Error classification patterns ────────────────────────────────────────

# SQLSTATE codes surface in ODBC messages as "[23505]" etc.
_UNIQUE_PATTERNS = {"23505", "duplicate key", "unique constraint"}
_FOREIGN_KEY_PATTERNS = {"23503", "foreign key constraint"}
_CONNECTION_PATTERNS = {
    "08001",
    "08006",
    "connection refused",
    "could not connect",
    "connection not established",
    "server closed the connection",
}
_SYNTAX_PATTERNS = {"42601", "syntax error", "42p01", "does not exist"}


def classify_error(message: str | None) -> ErrorKind:
    """Classify a database error message into an error kind.

    Args:
        message: Error text reported by the SQL client.

    Returns:
        One of 'unique_violation', 'foreign_key_violation', 'connection',
        'syntax', or 'generic'.
    """
    text = (message or "").lower()
    for pattern in _UNIQUE_PATTERNS:
        if pattern in text:
            return "unique_violation"
    for pattern in _FOREIGN_KEY_PATTERNS:
        if pattern in text:
            return "foreign_key_violation"
    for pattern in _CONNECTION_PATTERNS:
        if pattern in text:
            return "connection"
    for pattern in _SYNTAX_PATTERNS:
        if pattern in text:
            return "syntax"
    return "generic"
