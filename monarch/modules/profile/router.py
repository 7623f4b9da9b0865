# monarch/modules/profile/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from monarch.config.database import get_db
from .service import ProfileService
from .schemas import ProfileUpdateRequest, ProfileResponse

router = APIRouter(prefix="/profile", tags=["Profile"])

@router.get("", response_model=ProfileResponse)
async def get_profile(db: Session = Depends(get_db)):
    """
    Rep name and company, falling back to the configured defaults
    """
    return ProfileService(db).get_profile()

@router.put("", response_model=ProfileResponse)
async def update_profile(profile_data: ProfileUpdateRequest, db: Session = Depends(get_db)):
    service = ProfileService(db)
    return await service.update_profile(profile_data)
