"""Per-portal link summaries: where each portal sends an entity, and from where it is reached."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class PortalLinkResult:
    """Outgoing link of one portal for one entity hitbox."""

    entity_fits: bool
    destination_ids: Tuple[int, ...] = ()
    new_portal: bool = False

    @classmethod
    def entity_wont_fit(cls) -> PortalLinkResult:
        return cls(entity_fits=False)


@dataclass
class PortalLinks:
    """Outgoing link of a portal plus the IDs of portals that lead to it."""

    outgoing: PortalLinkResult
    incoming: List[int] = field(default_factory=list)
