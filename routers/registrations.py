import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy import desc
from sqlalchemy.orm import Session

from database import get_db
from models import Registrations, Users
from schemas.registration import (
    CreateRegistrationSchema,
    RegistrationSchema,
    UpdateRegistrationStatusSchema,
)
from routers.auth import require_admin, get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registrations"])

admin_router = APIRouter(
    prefix="/admin/registrations",
    tags=["registrations"],
    dependencies=[Depends(require_admin)],  # all routes require an admin token
)


def newest_first(query):
    return query.order_by(desc(Registrations.timestamp), desc(Registrations.id))


# ------------------------------------------------------------------------
# POST /register: public event registration
# ------------------------------------------------------------------------
@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register for an event; returns the ticket id",
)
def create_registration(
    data: CreateRegistrationSchema,
    db: Session = Depends(get_db),
):
    new_reg = Registrations(
        name=data.name,
        college=data.college,
        university_id=data.university_id,
        email=data.email,
        phone=data.phone,
        event=data.event_name,
        team_name=data.team_name,
        team_members=data.team_members,
    )
    db.add(new_reg)
    db.commit()
    db.refresh(new_reg)
    logger.info("Registration %s created for event %r", new_reg.id, new_reg.event)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "success": True,
            "message": "Registration Confirmed!",
            "ticketId": new_reg.id,
        },
    )


# ------------------------------------------------------------------------
# GET /my-registrations: registrations made with the caller's email
# ------------------------------------------------------------------------
@router.get(
    "/my-registrations",
    summary="List the logged-in user's registrations, latest first",
)
def my_registrations(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    user = db.get(Users, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "user_not_found", "message": "User not found"},
        )

    regs = newest_first(
        db.query(Registrations).filter(Registrations.email == user.email)
    ).all()
    return {
        "success": True,
        "registrations": [
            RegistrationSchema.model_validate(r).model_dump(by_alias=True, mode="json")
            for r in regs
        ],
    }


# ------------------------------------------------------------------------
# GET /admin/registrations: every registration, latest first
# ------------------------------------------------------------------------
@admin_router.get(
    "",
    response_model=List[RegistrationSchema],
    summary="Retrieve all registrations ordered by latest first",
)
def list_registrations(
    db: Session = Depends(get_db),
) -> List[Registrations]:
    return newest_first(db.query(Registrations)).all()


# ------------------------------------------------------------------------
# PUT /admin/registrations/{registration_id}: change the status only
# ------------------------------------------------------------------------
@admin_router.put(
    "/{registration_id}",
    summary="Update a registration's status",
)
def update_registration_status(
    registration_id: int,
    data: UpdateRegistrationStatusSchema,
    db: Session = Depends(get_db),
):
    """Unknown ids are a no-op. No field other than `status` is written."""
    db.query(Registrations).filter(Registrations.id == registration_id).update(
        {Registrations.status: data.status}, synchronize_session=False
    )
    db.commit()
    return {"success": True}


# ------------------------------------------------------------------------
# DELETE /admin/registrations/{registration_id}
# ------------------------------------------------------------------------
@admin_router.delete(
    "/{registration_id}",
    summary="Delete a registration",
)
def delete_registration(
    registration_id: int,
    db: Session = Depends(get_db),
):
    db.query(Registrations).filter(Registrations.id == registration_id).delete(
        synchronize_session=False
    )
    db.commit()
    return {"success": True}
