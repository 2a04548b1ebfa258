"""Logical resource name to backend path resolution."""

from typing import Dict, Mapping, Optional


class EndpointResolver:
    """Case-insensitive lookup over a static endpoint table.

    The table is copied at construction. Unknown names resolve to
    None; falling back to the raw name is the caller's decision.
    """

    def __init__(self, endpoints: Mapping[str, str]):
        normalized: Dict[str, str] = {}
        for name, path in endpoints.items():
            # First spelling wins when two keys differ only by case
            normalized.setdefault(name.lower(), path)
        self._table = normalized

    def resolve(self, logical_name: str) -> Optional[str]:
        return self._table.get(logical_name.lower())

    def __contains__(self, logical_name: object) -> bool:
        return isinstance(logical_name, str) and logical_name.lower() in self._table

    def __len__(self) -> int:
        return len(self._table)
