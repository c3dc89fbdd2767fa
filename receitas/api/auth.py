# Authentication API routes for user sign-up and sign-in

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from receitas.dependencies import get_credential_store, get_session_issuer
from receitas.schemas import MessageResponse, SignInRequest, SignUpRequest
from receitas.services import CredentialStore, SessionIssuer
from receitas.utils.logger import setup_logger

logger = setup_logger("api.auth")

router = APIRouter(tags=["Authentication"])


@router.post(
    "/sign-up", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    user_data: SignUpRequest,
    credential_store: CredentialStore = Depends(get_credential_store),
):
    """Register a new user with name, email and password."""
    await credential_store.register(user_data.nome, user_data.email, user_data.senha)
    return MessageResponse(message="User registered successfully")


@router.post("/sign-in", response_class=PlainTextResponse)
async def sign_in(
    user_data: SignInRequest,
    credential_store: CredentialStore = Depends(get_credential_store),
    session_issuer: SessionIssuer = Depends(get_session_issuer),
):
    """Check the credentials and answer with a new session token as plain text."""
    user_id = await credential_store.authenticate(user_data.email, user_data.senha)
    token = await session_issuer.issue(user_id)
    return PlainTextResponse(token)
