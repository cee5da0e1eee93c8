"""
Authentication endpoints for user registration and login.

- POST /register: Create new user account (POST /user is kept as an alias)
- POST /login: Check credentials and receive a bearer token
"""

from fastapi import APIRouter, Depends

from jobboard.core.deps import get_auth_service
from jobboard.schemas.user import LoginResponse, RegisterResponse, UserLoginRequest, UserRegisterRequest
from jobboard.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


@router.post("/register", status_code=201, response_model=RegisterResponse)
def register(
    request: UserRegisterRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user account.

    Every violated rule is reported at once (400). A duplicate username or
    email is also a 400, naming the field(s) already taken.
    """
    user = auth_service.register(request.username, request.email, request.password)
    return RegisterResponse(user_id=user.id)


# Older clients register through POST /user
router.add_api_route(
    "/user",
    register,
    methods=["POST"],
    status_code=201,
    response_model=RegisterResponse,
    include_in_schema=False,
)


@router.post("/login", response_model=LoginResponse)
def login(
    request: UserLoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Authenticate user and return a bearer token.

    Send it back as `Authorization: Bearer <token>`. With the default token
    scheme the token is simply the user's id.
    """
    user, token = auth_service.login(request.username, request.password)
    return LoginResponse(user_id=user.id, username=user.username, token=token)
