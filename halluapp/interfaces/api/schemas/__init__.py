from .auth import (
    IdentityLoginRequest,
    LoginRequest,
    RegisterRequest,
    SessionResponse,
)
from .catalog import (
    AppInfo,
    AuthState,
    CategoryRead,
    DashboardPage,
    HomePage,
    SubCategoryRead,
)
from .invitation import (
    InvitationCreate,
    InvitationCreated,
    InvitationPageRead,
    InvitationRead,
)
from .user import (
    ProfileDelete,
    ProfileUpdate,
    RoleRead,
    UserRead,
    UserSummaryRead,
)

__all__ = [
    "AppInfo",
    "AuthState",
    "CategoryRead",
    "DashboardPage",
    "HomePage",
    "IdentityLoginRequest",
    "InvitationCreate",
    "InvitationCreated",
    "InvitationPageRead",
    "InvitationRead",
    "LoginRequest",
    "ProfileDelete",
    "ProfileUpdate",
    "RegisterRequest",
    "RoleRead",
    "SessionResponse",
    "SubCategoryRead",
    "UserRead",
    "UserSummaryRead",
]
