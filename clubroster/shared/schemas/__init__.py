"""
Pydantic Schemas

Request/response models for the HTTP API.

Modules:
========
- common: BaseSchema, error and health responses
- user: UserResponse
- club: ClubCreate, ClubResponse, ClubListResponse
- membership: MembershipResponse, role and ownership requests
"""

from clubroster.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from clubroster.shared.schemas.user import UserResponse
from clubroster.shared.schemas.club import ClubCreate, ClubResponse, ClubListResponse
from clubroster.shared.schemas.membership import (
    MembershipResponse,
    MemberListResponse,
    AddMemberRequest,
    RoleChangeRequest,
    RoleResponse,
    OwnershipTransferRequest,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Users
    "UserResponse",
    # Clubs
    "ClubCreate",
    "ClubResponse",
    "ClubListResponse",
    # Memberships
    "MembershipResponse",
    "MemberListResponse",
    "AddMemberRequest",
    "RoleChangeRequest",
    "RoleResponse",
    "OwnershipTransferRequest",
]
