"""
Member endpoints: registration, login and lookup by name.

Every outcome is answered with HTTP 200; the ``success`` (or
``exists``) flag tells the client what happened.  The messages are the
ones the client displays verbatim.
"""

import logging

from fastapi import APIRouter, Depends

from social_feed_api.app.api.deps import get_account_service
from social_feed_api.app.core.errors import (
    AuthError,
    DuplicateEmailError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from social_feed_api.app.schemas.common import CreateResponse
from social_feed_api.app.schemas.member import (
    LoginResponse,
    MemberLogin,
    MemberLookupResponse,
    MemberRegister,
)
from social_feed_api.app.services.account_service import AccountService


logger = logging.getLogger(__name__)

MISSING_DATA = "Faltan datos"
EMAIL_TAKEN = "Ese correo ya está registrado"
REGISTER_STORE_ERROR = "Error base datos"
LOGIN_STORE_ERROR = "Error BD"
MEMBER_NOT_FOUND = "Usuario no encontrado"
WRONG_PASSWORD = "Contraseña incorrecta"

router = APIRouter()


@router.post("/registro", response_model=CreateResponse, response_model_exclude_none=True)
async def register(
    data: MemberRegister,
    service: AccountService = Depends(get_account_service),
) -> CreateResponse:
    """Register a new member and return its id."""
    try:
        created = await service.register(data.nombre, data.email, data.password)
    except ValidationError:
        return CreateResponse(success=False, message=MISSING_DATA)
    except DuplicateEmailError:
        return CreateResponse(success=False, message=EMAIL_TAKEN)
    except StoreError:
        return CreateResponse(success=False, message=REGISTER_STORE_ERROR)
    return CreateResponse(success=True, id=created.id)


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(
    data: MemberLogin,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    """Check credentials and return the member's id and name."""
    try:
        member = await service.login(data.email, data.password)
    except ValidationError:
        return LoginResponse(success=False, message=MISSING_DATA)
    except NotFoundError:
        return LoginResponse(success=False, message=MEMBER_NOT_FOUND)
    except AuthError:
        return LoginResponse(success=False, message=WRONG_PASSWORD)
    except StoreError as e:
        logger.error("Login failed on store error: %s", e.message)
        return LoginResponse(success=False, message=LOGIN_STORE_ERROR)
    return LoginResponse(success=True, id=member.id, nombre=member.name)


@router.get(
    "/buscar-usuario/{nombre}",
    response_model=MemberLookupResponse,
    response_model_exclude_none=True,
)
async def find_member(
    nombre: str,
    service: AccountService = Depends(get_account_service),
) -> MemberLookupResponse:
    """Tell whether a member with exactly this name exists."""
    try:
        member = await service.find_by_name(nombre)
    except StoreError as e:
        logger.warning("Member lookup degraded to not found: %s", e.message)
        return MemberLookupResponse(exists=False)
    if member is None:
        return MemberLookupResponse(exists=False)
    return MemberLookupResponse(exists=True, id=member.id, nombre=member.name)
