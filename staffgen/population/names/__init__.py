"""Name generation for synthetic employees.

Names and surnames come from bundled Czech tables keyed by gender.
"""

from .generator import NameTables, default_tables, generate_name

__all__ = ["NameTables", "default_tables", "generate_name"]
