import hmac
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status

from config import Settings, get_settings
from schemas.auth import AdminLoginSchema
from utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


# ------------------------------------------------------------------------
# POST /admin/login: shared-password login for the organisers' dashboard
# ------------------------------------------------------------------------
@router.post(
    "/login",
    summary="Exchange the admin password for a short-lived admin token",
)
def admin_login(
    data: AdminLoginSchema,
    settings: Settings = Depends(get_settings),
):
    if not hmac.compare_digest(
        data.password.encode("utf-8"), settings.admin_password.encode("utf-8")
    ):
        logger.warning("Rejected admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_password", "message": "Invalid Admin Password"},
        )

    token = create_access_token(
        {"role": "admin"},
        settings.secret_key,
        timedelta(minutes=settings.admin_token_expire_minutes),
        settings.algorithm,
    )
    logger.info("Admin logged in")
    return {"success": True, "token": token}
