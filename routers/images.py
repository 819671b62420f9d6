import logging
from typing import List, Optional

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    status,
    UploadFile,
    File,
    Form,
)
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import Settings, get_settings
from database import get_db
from models import Images
from schemas.image import ImageSchema, UpdateImageSchema
from routers.auth import require_admin
from utils.uploads import build_filename, check_image, save_upload, remove_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])

admin_router = APIRouter(
    prefix="/admin/images",
    tags=["images"],
    dependencies=[Depends(require_admin)],
)


# ------------------------------------------------------------------------
# GET /images: public gallery, latest first
# ------------------------------------------------------------------------
@router.get(
    "/images",
    response_model=List[ImageSchema],
    summary="Retrieve all gallery images ordered by latest first",
)
def list_images(
    db: Session = Depends(get_db),
) -> List[Images]:
    return db.query(Images).order_by(desc(Images.uploaded_at), desc(Images.id)).all()


# ------------------------------------------------------------------------
# POST /admin/images: upload a gallery image
# ------------------------------------------------------------------------
@admin_router.post(
    "",
    summary="Upload a gallery image with its title and category",
)
async def upload_image(
    image: Optional[UploadFile] = File(None, description="Image file"),
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    - Rejects requests without a file, or whose file is not an image
    - Stores the file under `UPLOAD_DIR` as `<millis>-<name>`
    - Persists the metadata record
    """
    # 1) Require a file
    if image is None or not image.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "no_file", "message": "No file uploaded."},
        )

    # 2) Read & validate in-memory
    contents = await image.read()
    try:
        check_image(contents)
    except (OSError, SyntaxError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_image", "message": "Uploaded file is not a valid image."},
        )

    # 3) Save to disk
    filename = build_filename(image.filename)
    save_upload(settings.upload_dir, filename, contents)

    # 4) Persist record; drop the file again if that fails
    new_image = Images(
        filename=filename,
        url=f"/uploads/{filename}",
        title=title,
        category=category,
    )
    db.add(new_image)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        remove_upload(settings.upload_dir, filename)
        raise
    db.refresh(new_image)
    logger.info("Uploaded gallery image %s", filename)

    return {
        "success": True,
        "image": ImageSchema.model_validate(new_image).model_dump(by_alias=True, mode="json"),
    }


# ------------------------------------------------------------------------
# PUT /admin/images/{image_id}: update title and/or category
# ------------------------------------------------------------------------
@admin_router.put(
    "/{image_id}",
    summary="Update an image's title or category",
)
def update_image(
    image_id: int,
    data: UpdateImageSchema,
    db: Session = Depends(get_db),
):
    changes = {
        getattr(Images, field): value
        for field, value in data.model_dump(exclude_none=True).items()
    }
    if changes:
        db.query(Images).filter(Images.id == image_id).update(
            changes, synchronize_session=False
        )
        db.commit()
    return {"success": True}


# ------------------------------------------------------------------------
# DELETE /admin/images/{image_id}: delete the record and its file
# ------------------------------------------------------------------------
@admin_router.delete(
    "/{image_id}",
    summary="Delete a gallery image and its stored file",
)
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Deleting an unknown id, or one whose file is already gone, still succeeds."""
    image = db.get(Images, image_id)
    if image is None:
        return {"success": True}

    filename = image.filename
    db.delete(image)
    db.commit()
    remove_upload(settings.upload_dir, filename)
    logger.info("Deleted gallery image %s", filename)
    return {"success": True}
