"""
Business Logic Services

Services encapsulate business logic and coordinate repositories.

Service Pattern:
================
    Handler → ClubOwnerService / ClubModerationService
                    ↓
              ClubMembershipService → ClubMembershipRepository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Share the caller's session (one transaction per operation)
- NOT handle HTTP concerns or authorization (that's for handlers)

Available Services:
===================
- UserService: User lookup and registration
- ClubService: Club lookup, registration and deletion
- ClubMembershipService: Enrollment, roles, deregistration
- ClubOwnerService: Ownership transfer, moderator promotion/demotion
- ClubModerationService: Moderator-level roster management

Usage:
======
    from clubroster.shared.db import unit_of_work
    from clubroster.shared.services import ClubOwnerService

    async with unit_of_work() as session:
        await ClubOwnerService(session).transfer_ownership(
            club_id, new_owner_id, True, False, acting_user_id
        )
"""

from clubroster.shared.services.user_service import UserService
from clubroster.shared.services.club_service import ClubService
from clubroster.shared.services.club_membership_service import ClubMembershipService
from clubroster.shared.services.club_owner_service import ClubOwnerService
from clubroster.shared.services.club_moderation_service import ClubModerationService

__all__ = [
    "UserService",
    "ClubService",
    "ClubMembershipService",
    "ClubOwnerService",
    "ClubModerationService",
]
