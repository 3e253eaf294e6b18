"""Domain error types."""


class PersistenceError(Exception):
    """The configuration file is missing, unreadable, unparsable, or unwritable.

    Returned as a value by the repository gateway; the store converts it to
    defaults (on read) or a log line (on write) and never lets it escape.
    """
