import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import desc
from sqlalchemy.orm import Session

from database import get_db
from models import Messages
from schemas.message import CreateMessageSchema, MessageSchema
from routers.auth import require_admin

logger = logging.getLogger(__name__)

DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

router = APIRouter(tags=["messages"])

admin_router = APIRouter(
    prefix="/admin/messages",
    tags=["messages"],
    dependencies=[Depends(require_admin)],
)


def format_date(msg: Messages) -> str:
    return msg.timestamp.strftime(DATE_FORMAT) if msg.timestamp else "N/A"


# ------------------------------------------------------
# POST /contact: store a contact-form message
# ------------------------------------------------------
@router.post(
    "/contact",
    summary="Send a message to the organisers",
)
def send_message(
    payload: CreateMessageSchema,
    db: Session = Depends(get_db),
):
    new_msg = Messages(
        name=payload.name,
        email=payload.email,
        message=payload.message,
    )
    db.add(new_msg)
    db.commit()
    logger.info("Contact message received from %s", payload.email)
    return {"success": True, "message": "Transmission Received."}


# ------------------------------------------------------
# GET /admin/messages: all messages (latest first)
# ------------------------------------------------------
@admin_router.get(
    "",
    response_model=List[MessageSchema],
    summary="Retrieve all contact messages ordered by latest first",
)
def list_messages(
    db: Session = Depends(get_db),
) -> List[MessageSchema]:
    msgs = db.query(Messages).order_by(desc(Messages.timestamp), desc(Messages.id)).all()
    return [
        MessageSchema(
            id=msg.id,
            name=msg.name,
            email=msg.email,
            message=msg.message,
            date=format_date(msg),
        )
        for msg in msgs
    ]


# ------------------------------------------------------
# DELETE /admin/messages/{message_id}
# ------------------------------------------------------
@admin_router.delete(
    "/{message_id}",
    summary="Delete a contact message",
)
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
):
    db.query(Messages).filter(Messages.id == message_id).delete(synchronize_session=False)
    db.commit()
    return {"success": True}
