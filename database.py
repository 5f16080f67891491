"""
Database helpers

Thin MongoDB access layer for blog posts. The client is built explicitly by
``connect`` and handed to ``BlogStore``; nothing here keeps a global handle.
"""

import logging
from typing import Any, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from schemas import BLOG_COLLECTION, BlogDraft, BlogPost, BlogUpdate

logger = logging.getLogger(__name__)

PUBLIC_FIELDS = ("title", "author", "url", "likes")


def connect(database_url: str, database_name: str) -> Database:
    """Create a MongoClient for ``database_url`` and return the named database."""
    client = MongoClient(database_url)
    return client[database_name]


def normalize_blog(doc: dict) -> dict:
    """Map a stored document to its public shape.

    ``_id`` becomes a string ``id``; storage-only keys are dropped.
    """
    blog = {"id": str(doc["_id"])}
    for field in PUBLIC_FIELDS:
        blog[field] = doc.get(field)
    if blog["likes"] is None:
        blog["likes"] = 0
    return blog


def _object_id(blog_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(blog_id)
    except (InvalidId, TypeError):
        return None


class BlogStore:
    """Create, read, update and delete blog posts in a single collection."""

    def __init__(self, db: Database, collection_name: str = BLOG_COLLECTION):
        self.collection: Collection = db[collection_name]

    def create(self, draft: Union[BlogDraft, dict[str, Any]]) -> BlogPost:
        if not isinstance(draft, BlogDraft):
            # raises pydantic.ValidationError on missing title/url
            draft = BlogDraft.model_validate(draft)
        doc = draft.model_dump()
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created blog %s", result.inserted_id)
        return BlogPost(**normalize_blog(doc))

    def find_all(self) -> list[BlogPost]:
        return [BlogPost(**normalize_blog(doc)) for doc in self.collection.find({})]

    def find_by_id(self, blog_id: str) -> Optional[BlogPost]:
        oid = _object_id(blog_id)
        if oid is None:
            return None
        doc = self.collection.find_one({"_id": oid})
        return BlogPost(**normalize_blog(doc)) if doc else None

    def update(self, blog_id: str, patch: BlogUpdate) -> Optional[BlogPost]:
        """Replace title, author, url and likes of a post.

        Returns the updated post, or None when no post has ``blog_id``.
        """
        oid = _object_id(blog_id)
        if oid is None:
            return None
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": patch.model_dump(include=set(PUBLIC_FIELDS))},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info("Updated blog %s", blog_id)
        return BlogPost(**normalize_blog(doc))

    def delete_by_id(self, blog_id: str) -> None:
        # deleting an unknown id is a no-op
        oid = _object_id(blog_id)
        if oid is None:
            return
        result = self.collection.delete_one({"_id": oid})
        if result.deleted_count:
            logger.info("Deleted blog %s", blog_id)

    def count(self) -> int:
        return self.collection.count_documents({})

    def clear(self) -> None:
        """Remove every post. Test setup only."""
        self.collection.delete_many({})
