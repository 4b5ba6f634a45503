"""MongoDB storage backend for study_srs."""

from study_srs.infra.mongo.client import MongoClient
from study_srs.infra.mongo.repositories import MongoReviewRepository

__all__ = [
    "MongoClient",
    "MongoReviewRepository",
]
