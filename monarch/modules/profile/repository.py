# monarch/modules/profile/repository.py
from typing import Dict, List
from sqlalchemy.orm import Session

from monarch.shared.database.models import Setting

class ProfileRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_settings(self) -> List[Setting]:
        return self.db.query(Setting).order_by(Setting.id).all()

    def get_values(self) -> Dict[str, str]:
        return {s.key: s.value for s in self.get_settings()}

    def set_values(self, values: Dict[str, str]):
        """
        Upsert each key/value pair in one commit
        """
        for key, value in values.items():
            setting = self.db.query(Setting).filter(Setting.key == key).first()
            if setting:
                setting.value = value
            else:
                self.db.add(Setting(key=key, value=value))

        self.db.commit()
