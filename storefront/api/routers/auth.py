# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_mail_client
from storefront.data.database import get_db
from storefront.domain.schemas import (
    MessageOut,
    RequestResetIn,
    ResetPasswordIn,
    SigninIn,
    SignupIn,
    UserRead,
)
from storefront.services.auth_service import AuthResult, AuthService
from storefront.services.mail_client import MailClient
from storefront.utils.settings import SESSION_COOKIE_NAME, SESSION_MAX_AGE

router = APIRouter(prefix="/auth", tags=["auth"])


def get_service(db: Session, mail_client: MailClient):
    return AuthService(db, mail_client=mail_client)


def start_session(response: Response, result: AuthResult):
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=result.token,
        max_age=SESSION_MAX_AGE,
        httponly=True,
    )
    return result.user


@router.post("/signup", response_model=UserRead)
def signup(
    payload: SignupIn,
    response: Response,
    db: Session = Depends(get_db),
    mail_client: MailClient = Depends(get_mail_client),
):
    svc = get_service(db, mail_client)
    return start_session(response, svc.signup(payload.email, payload.password, payload.name))


@router.post("/signin", response_model=UserRead)
def signin(
    payload: SigninIn,
    response: Response,
    db: Session = Depends(get_db),
    mail_client: MailClient = Depends(get_mail_client),
):
    svc = get_service(db, mail_client)
    return start_session(response, svc.signin(payload.email, payload.password))


@router.post("/signout", response_model=MessageOut)
def signout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME, httponly=True)
    return {"message": "Goodbye!"}


@router.post("/request-reset", response_model=MessageOut)
def request_reset(
    payload: RequestResetIn,
    db: Session = Depends(get_db),
    mail_client: MailClient = Depends(get_mail_client),
):
    svc = get_service(db, mail_client)
    svc.request_reset(payload.email)
    return {"message": "thanks"}


@router.post("/reset-password", response_model=UserRead)
def reset_password(
    payload: ResetPasswordIn,
    response: Response,
    db: Session = Depends(get_db),
    mail_client: MailClient = Depends(get_mail_client),
):
    svc = get_service(db, mail_client)
    result = svc.reset_password(payload.password, payload.confirm_password, payload.reset_token)
    return start_session(response, result)
