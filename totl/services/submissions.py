from typing import Hashable, Iterable


def all_members_submitted(member_ids: Iterable[Hashable], submissions: Iterable, gw: int) -> bool:
    """True when every league member has submitted picks for ``gw``."""
    members = set(member_ids)
    if not members:
        return False
    submitted = {s.user_id for s in submissions if s.gw == gw}
    return members <= submitted
