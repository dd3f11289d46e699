"""Vendor specific DDL fragments shared by the schema bootstrap code."""

IDENTITY_COLUMNS = {
    'postgresql': '{name} serial primary key',
    'mysql': '{name} integer primary key auto_increment',
    'oracle': '{name} integer generated by default as identity primary key',
}

DEFAULT_IDENTITY_COLUMN = '{name} integer primary key autoincrement'


def identity_column(vendor: str, name: str = 'id') -> str:
    """Auto-incrementing primary key column definition for ``vendor``."""
    return IDENTITY_COLUMNS.get(vendor, DEFAULT_IDENTITY_COLUMN).format(name=name)
