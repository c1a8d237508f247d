"""Runtime package.

Settings loading, logging setup and dependency wiring. Importing
`src.runtime.*` must not open network connections.
"""

__all__: list[str] = []
