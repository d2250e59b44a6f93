# miniblog/core/ownership.py
"""
Ownership policy: only the account that created a post or comment may change it.
There is no role hierarchy or admin override.
"""
from miniblog.core.errors import AuthRequired, Forbidden
from miniblog.core.security import TokenClaims


def can_mutate(actor_id: int, owner_id: int) -> bool:
    return actor_id == owner_id


def ensure_can_mutate(actor: TokenClaims | None, owner_id: int, resource: str = "resource") -> TokenClaims:
    """
    Raise unless the actor owns the resource.

    Raises:
        AuthRequired: If there is no authenticated actor
        Forbidden: If the actor is not the owner
    """
    if actor is None:
        raise AuthRequired()
    if not can_mutate(actor.subject_id, owner_id):
        raise Forbidden(f"You can only modify your own {resource}")
    return actor
