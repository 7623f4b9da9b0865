# monarch/modules/profile/service.py
import logging
from typing import List, Dict, Any
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from monarch.config.settings import settings
from monarch.shared.live import publish_collection, to_records
from .repository import ProfileRepository
from .schemas import ProfileUpdateRequest, ProfileResponse, SettingRecord

logger = logging.getLogger(__name__)

class ProfileService:
    """
    Rep name and company, kept in the settings collection
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProfileRepository(db)

    def get_profile(self) -> ProfileResponse:
        values = self.repository.get_values()
        return ProfileResponse(
            rep_name=values.get("rep_name") or settings.default_rep_name,
            company=values.get("company") or settings.default_company
        )

    async def update_profile(self, profile_data: ProfileUpdateRequest) -> ProfileResponse:
        changes = profile_data.model_dump(exclude_none=True)
        if changes:
            try:
                self.repository.set_values(changes)
            except SQLAlchemyError as e:
                self.db.rollback()
                raise HTTPException(status_code=500, detail=f"Error saving profile: {str(e)}")

            logger.info(f"Profile updated: {', '.join(sorted(changes))}")
            publish_collection("settings", self.repository.get_settings(), SettingRecord)

        return self.get_profile()

    def settings_snapshot(self) -> List[Dict[str, Any]]:
        return to_records(self.repository.get_settings(), SettingRecord)
