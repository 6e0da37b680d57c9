"""Repository Factory - DRY Implementation"""
from progress_point.repositories.batch.batch_repo import BatchRepo
from progress_point.repositories.admin.time_restriction_repo import TimeRestrictionRepo

class RepositoryFactory:
    """Centralized repository creation (DRY principle)"""

    @classmethod
    def get_batch_repo(cls) -> BatchRepo:
        """Get batch repository instance with caching"""
        if not hasattr(cls, '_batch_repo'):
            cls._batch_repo = BatchRepo()
        return cls._batch_repo

    @classmethod
    def get_time_restriction_repo(cls) -> TimeRestrictionRepo:
        """Get time restriction repository instance with caching"""
        if not hasattr(cls, '_time_restriction_repo'):
            cls._time_restriction_repo = TimeRestrictionRepo()
        return cls._time_restriction_repo
