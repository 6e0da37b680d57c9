"""Time Restriction Repository - Data Access Layer (SoC)"""
from typing import Dict, List, Optional
from pymongo import ReturnDocument
from progress_point.db.central_db import time_restrictions_collection

class TimeRestrictionRepo:
    def __init__(self, collection=None):
        self.collection = collection if collection is not None else time_restrictions_collection

    def find_all(self) -> List[Dict]:
        return list(self.collection.find({}, {"_id": 0}))

    def find_by_type(self, restriction_type: str) -> Optional[Dict]:
        return self.collection.find_one({"type": restriction_type}, {"_id": 0})

    def upsert(self, restriction_type: str, restriction: Dict) -> Dict:
        """Create or update the restriction and return the stored document"""
        return self.collection.find_one_and_update(
            {"type": restriction_type},
            {"$set": restriction},
            projection={"_id": 0},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )

    def delete(self, restriction_type: str) -> bool:
        """Permanently delete restriction (hard delete)"""
        result = self.collection.delete_one({"type": restriction_type})
        return result.deleted_count > 0
