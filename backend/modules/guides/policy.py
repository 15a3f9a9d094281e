"""
Guide authorization policies.

One policy object per kind of actor; the service asks the policy and
never branches on roles itself.
"""

from typing import Optional

from shared.models import User

from .models import GuideListItem


class GuidePolicy:
    """Base policy: published guides are readable, nothing is editable."""

    def __init__(self, actor: Optional[User] = None):
        self.actor = actor

    @property
    def is_authenticated(self) -> bool:
        return False

    def can_edit(self, guide: GuideListItem) -> bool:
        return False

    def can_view(self, guide: GuideListItem) -> bool:
        return guide.is_published or self.can_edit(guide)


class AnonymousPolicy(GuidePolicy):
    """Callers without an active session."""


class CreatorPolicy(GuidePolicy):
    """Members may manage only the guides they created."""

    @property
    def is_authenticated(self) -> bool:
        return True

    def can_edit(self, guide: GuideListItem) -> bool:
        return self.actor is not None and guide.creator_id == self.actor.id


class ElevatedPolicy(CreatorPolicy):
    """Editors and admins may manage any guide."""

    def can_edit(self, guide: GuideListItem) -> bool:
        return True


def policy_for(actor: Optional[User]) -> GuidePolicy:
    """Select the policy governing ``actor``."""
    if actor is None or not actor.is_active:
        return AnonymousPolicy()
    if actor.role.is_elevated:
        return ElevatedPolicy(actor)
    return CreatorPolicy(actor)
