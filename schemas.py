"""
Database Schemas

Pydantic models describing the documents stored in MongoDB.
- BlogDraft  -> what a client sends to create a post
- BlogUpdate -> what a client sends to replace a post (likes required)
- BlogPost   -> what is stored in the "blogs" collection and returned by the API
"""

from pydantic import BaseModel, Field
from typing import Optional

BLOG_COLLECTION = "blogs"

# BSON stores integers as at most 8-byte signed values
MAX_LIKES = 2**63 - 1


class BlogDraft(BaseModel):
    """
    Client supplied blog post, not yet persisted.
    Used as the body of POST /api/blogs.
    """
    title: str = Field(..., min_length=1, description="Post title")
    author: Optional[str] = Field(None, description="Author display name (optional, may be empty)")
    url: str = Field(..., min_length=1, description="Link to the post")
    likes: int = Field(0, ge=0, le=MAX_LIKES, description="Like count, 0 when omitted")


class BlogUpdate(BlogDraft):
    """
    Full replacement of a post's fields.
    Used as the body of PUT /api/blogs/{id}.
    """
    likes: int = Field(..., ge=0, le=MAX_LIKES, description="Like count")


class BlogPost(BlogDraft):
    """
    Persisted blog post as exposed to clients
    Collection name: "blogs"
    """
    id: str = Field(..., description="Public identifier (stringified ObjectId)")
