"""Landing and dashboard payloads consumed by the front end."""

from fastapi import APIRouter, Depends

from halluapp.application.use_cases import list_categories
from halluapp.domain.entities import User
from halluapp.interfaces.api.dependencies import AuthContext, get_auth_context, get_current_user
from halluapp.interfaces.api.routes_helpers import to_user_read
from halluapp.interfaces.api.schemas import (
    AppInfo,
    AuthState,
    CategoryRead,
    DashboardPage,
    HomePage,
)

router = APIRouter(tags=["pages"])


@router.get("/", response_model=HomePage)
def welcome(context: AuthContext = Depends(get_auth_context)) -> HomePage:
    """Return the landing page data: the visitor and the category catalog."""

    user = to_user_read(context.user) if context.user else None
    return HomePage(
        auth=AuthState(user=user),
        current_route="welcome",
        app=AppInfo(),
        categories=[CategoryRead.model_validate(category) for category in list_categories()],
    )


@router.get("/dashboard", response_model=DashboardPage)
def dashboard(current_user: User = Depends(get_current_user)) -> DashboardPage:
    return DashboardPage(
        auth=AuthState(user=to_user_read(current_user)),
        current_route="dashboard",
    )
