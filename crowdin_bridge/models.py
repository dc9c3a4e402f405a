"""
Data shapes returned by the Crowdin API.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass
class CrowdinUser:
    """
    The authenticated Crowdin viewer.

    Field names follow the GraphQL schema so the handover payload matches
    what Crowdin returned. ``present`` holds the keys Crowdin actually sent;
    a key sent as ``null`` is present, a key left out is not.
    """

    id: int
    username: Optional[str] = None
    isAdmin: Optional[bool] = None
    createdAt: Optional[str] = None
    present: Optional[FrozenSet[str]] = field(default=None, compare=False, repr=False)

    FIELD_ORDER = ('username', 'isAdmin', 'id', 'createdAt')

    def __post_init__(self):
        if self.present is None:
            self.present = frozenset(
                name for name in self.FIELD_ORDER if getattr(self, name) is not None
            )

    @classmethod
    def from_viewer(cls, viewer: dict) -> "CrowdinUser":
        known = set(cls.FIELD_ORDER)
        values = {key: value for key, value in viewer.items() if key in known}
        return cls(present=frozenset(values), **values)

    def to_dict(self) -> dict:
        """Serialize in query order, leaving out fields Crowdin did not send."""
        return {name: getattr(self, name) for name in self.FIELD_ORDER if name in self.present}
