"""Use cases for managing invitations."""

from .codes import generate_invitation_code
from .create_invitation import INVITABLE_ROLE_SLUGS, create_invitation
from .delete_invitation import delete_invitation
from .list_invitations import InvitationPage, list_invitations
from .redeem_invitation import claim_invitation, get_valid_invitation

__all__ = [
    "INVITABLE_ROLE_SLUGS",
    "InvitationPage",
    "claim_invitation",
    "create_invitation",
    "delete_invitation",
    "generate_invitation_code",
    "get_valid_invitation",
    "list_invitations",
]
