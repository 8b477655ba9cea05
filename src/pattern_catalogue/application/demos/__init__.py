"""Pattern usage demonstrations.

Importing this package registers every demo with ``@demo``.
"""

from . import behavioral, creational, structural

__all__ = ["creational", "structural", "behavioral"]
