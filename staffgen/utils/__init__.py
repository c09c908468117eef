"""Pure utility functions for staffgen.

Nothing here depends on staffgen models or other staffgen modules, so it
can be imported from anywhere without circular import risk.
"""

from .selection import UniformSource, pick

__all__ = ["UniformSource", "pick"]
