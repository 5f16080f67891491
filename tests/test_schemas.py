import pytest
from pydantic import ValidationError

from schemas import MAX_LIKES, BlogDraft, BlogPost, BlogUpdate


def test_draft_defaults():
    draft = BlogDraft(title="T", url="U")
    assert draft.likes == 0
    assert draft.author is None


def test_draft_allows_empty_author():
    assert BlogDraft(title="T", url="U", author="").author == ""


@pytest.mark.parametrize(
    "data",
    [
        {"url": "U"},
        {"title": "T"},
        {"title": "", "url": "U"},
        {"title": "T", "url": ""},
        {"title": "T", "url": "U", "likes": -3},
        {"title": "T", "url": "U", "likes": "many"},
        {"title": "T", "url": "U", "likes": 2**70},
    ],
)
def test_draft_rejects_invalid(data):
    with pytest.raises(ValidationError):
        BlogDraft(**data)


def test_post_requires_id():
    with pytest.raises(ValidationError):
        BlogPost(title="T", url="U")


def test_draft_accepts_largest_storable_likes():
    assert BlogDraft(title="T", url="U", likes=MAX_LIKES).likes == MAX_LIKES


def test_update_requires_likes():
    with pytest.raises(ValidationError):
        BlogUpdate(title="T", url="U")
    assert BlogUpdate(title="T", url="U", likes=0).likes == 0
