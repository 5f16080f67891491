"""Fixture data and read-back helpers shared by the test suite."""

from database import BlogStore

INITIAL_BLOGS = [
    {
        "title": "Test 1",
        "author": "Author 1",
        "url": "www.url1.com",
        "likes": 0,
    },
    {
        "title": "Test 2",
        "author": "Author 2",
        "url": "www.url2.com",
        "likes": 10,
    },
]


def blogs_in_db(store: BlogStore) -> list[dict]:
    """Return every persisted post in its public shape."""
    return [blog.model_dump() for blog in store.find_all()]
