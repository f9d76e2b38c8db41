# routers/resources.py

from fastapi import Depends, File, UploadFile

from dependencies.services import get_catalog
from models.enums import EntityKind
from routers.published import build_published_router
from services.catalog import PublishedCatalog


router = build_published_router(EntityKind.resource, "/resources", "Resources")


# -----------------------------------------------------
# UPLOAD RESOURCE FILE
# Returns the public URL to send back as `file_url` on create/update
# -----------------------------------------------------
@router.post("/upload", summary="Upload a downloadable resource file")
async def upload_resource_file(
    file: UploadFile = File(...),
    catalog: PublishedCatalog = Depends(get_catalog),
):
    content = await file.read()
    public_url = catalog.upload_resource_file(file.filename, content, file.content_type)
    return {"file_url": public_url}
