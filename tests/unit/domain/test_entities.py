"""Unit tests for domain entities."""

from datetime import date
from uuid import uuid4

from domain.entities.post import Comment, Like, Post
from domain.entities.profile import EducationEntry, ExperienceEntry, Profile
from domain.entities.user import User


class TestUser:
    def test_email_is_normalized(self):
        user = User(name="Ada", email="  Ada@Example.COM ", password_hash="x")

        assert user.email == "ada@example.com"


class TestProfileSubLists:
    def test_add_experience_prepends(self):
        profile = Profile(user_id=uuid4(), status="Developer")
        first = ExperienceEntry(title="Dev", company="A", from_date=date(2020, 1, 1))
        second = ExperienceEntry(title="Lead", company="B", from_date=date(2022, 1, 1))

        profile.add_experience(first)
        profile.add_experience(second)

        assert profile.experience == [second, first]

    def test_remove_experience_by_id(self):
        profile = Profile(user_id=uuid4(), status="Developer")
        keep = ExperienceEntry(title="Dev", company="A", from_date=date(2020, 1, 1))
        drop = ExperienceEntry(title="Lead", company="B", from_date=date(2022, 1, 1))
        profile.experience = [drop, keep]

        profile.remove_experience(drop.id)

        assert profile.experience == [keep]

    def test_remove_unknown_entry_is_noop(self):
        profile = Profile(user_id=uuid4(), status="Developer")
        entry = EducationEntry(
            school="MIT", degree="BSc", fieldofstudy="CS", from_date=date(2015, 9, 1)
        )
        profile.add_education(entry)

        profile.remove_education(uuid4())

        assert profile.education == [entry]

    def test_entry_document_uses_from_and_to_keys(self):
        entry = EducationEntry(
            school="MIT",
            degree="BSc",
            fieldofstudy="CS",
            from_date=date(2015, 9, 1),
            to_date=date(2019, 6, 1),
        )

        doc = entry.to_document()

        assert doc["from"] == "2015-09-01"
        assert doc["to"] == "2019-06-01"
        assert EducationEntry.from_document(doc) == entry


class TestPostEngagement:
    def test_like_unlike(self):
        author, fan = uuid4(), uuid4()
        post = Post(user_id=author, name="Ada", text="Hello")

        post.add_like(fan)
        assert post.is_liked_by(fan)
        assert post.likes == [Like(user_id=fan)]

        post.remove_like(fan)
        assert not post.is_liked_by(fan)
        assert post.likes == []

    def test_remove_like_only_touches_that_user(self):
        a, b = uuid4(), uuid4()
        post = Post(user_id=uuid4(), name="Ada", text="Hello")
        post.add_like(a)
        post.add_like(b)

        post.remove_like(a)

        assert post.likes == [Like(user_id=b)]

    def test_comments_are_prepended_and_addressable(self):
        post = Post(user_id=uuid4(), name="Ada", text="Hello")
        older = Comment(user_id=uuid4(), name="Bob", text="first")
        newer = Comment(user_id=uuid4(), name="Cy", text="second")

        post.add_comment(older)
        post.add_comment(newer)

        assert post.comments == [newer, older]
        assert post.get_comment(older.id) is older
        assert post.get_comment(uuid4()) is None

        post.remove_comment(newer.id)
        assert post.comments == [older]

    def test_comment_document_round_trip_keeps_date(self):
        comment = Comment(user_id=uuid4(), name="Bob", text="hi")

        restored = Comment.from_document(comment.to_document())

        assert restored == comment
