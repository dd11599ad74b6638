"""
Tests for user profiles, uploads and skills.
"""
import pytest
from sqlalchemy import select

from app.core.exceptions import UserNotFoundException
from app.models import Skill, User, UserSkill
from app.services.user_service import UserService
from tests.conftest import auth_headers, count_rows

USERS = "/api/v1/users"


class TestProfile:
    async def test_get_my_profile(self, client, jobseeker):
        response = await client.get(f"{USERS}/me", headers=auth_headers(jobseeker))

        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == jobseeker.user_id
        assert body["resume"] == jobseeker.resume
        assert body["skills"] == []

    async def test_public_profile_lists_skills(self, client, jobseeker):
        headers = auth_headers(jobseeker)
        await client.post(f"{USERS}/me/skills", json={"skill_name": "SQL"}, headers=headers)
        await client.post(f"{USERS}/me/skills", json={"skill_name": "Python"}, headers=headers)

        response = await client.get(f"{USERS}/{jobseeker.user_id}")

        assert response.status_code == 200
        assert response.json()["skills"] == ["Python", "SQL"]

    async def test_unknown_user_is_not_found(self, client):
        response = await client.get(f"{USERS}/9999")

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"

    async def test_user_id_beyond_integer_column_is_bad_request(self, client):
        response = await client.get(f"{USERS}/99999999999999999999")

        assert response.status_code == 400
        assert response.json()["message"] == "Missing or invalid fields: user_id"

    async def test_update_keeps_fields_not_sent(self, client, make_user):
        user = await make_user(name="Before", phone_number="555-0100", bio="Old bio")

        response = await client.put(
            f"{USERS}/me",
            json={"bio": "New bio", "name": ""},
            headers=auth_headers(user),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile Updated successfully"
        assert body["user"]["bio"] == "New bio"
        assert body["user"]["name"] == "Before"
        assert body["user"]["phone_number"] == "555-0100"


class TestUploads:
    async def test_profile_pic_replaces_previous_asset(self, client, make_user, uploader):
        user = await make_user(profile_pic_public_id="pic-old")

        response = await client.put(
            f"{USERS}/me/profile-pic",
            files={"file": ("me.jpg", b"jpeg bytes", "image/jpeg")},
            headers=auth_headers(user),
        )

        assert response.status_code == 200
        assert response.json()["message"] == "profile pic updated"
        assert uploader.calls[0]["public_id"] == "pic-old"
        assert uploader.calls[0]["buffer"].startswith("data:image/jpeg;base64,")

    async def test_missing_profile_pic_is_rejected(self, client, jobseeker, uploader):
        response = await client.put(f"{USERS}/me/profile-pic", headers=auth_headers(jobseeker))

        assert response.status_code == 400
        assert response.json()["message"] == "No image file provided"
        assert uploader.calls == []

    async def test_resume_upload_updates_profile(self, client, make_user, db_session):
        user = await make_user()

        response = await client.put(
            f"{USERS}/me/resume",
            files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
            headers=auth_headers(user),
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Resume updated"
        stored = await db_session.get(User, user.user_id)
        assert stored.resume == "https://cdn.example.com/assets/1"
        assert stored.resume_public_id == "asset-1"

    async def test_missing_resume_is_rejected(self, client, jobseeker):
        response = await client.put(f"{USERS}/me/resume", headers=auth_headers(jobseeker))

        assert response.status_code == 400
        assert response.json()["message"] == "No pdf file provided"


class TestSkills:
    async def test_add_skill(self, client, jobseeker):
        response = await client.post(
            f"{USERS}/me/skills",
            json={"skill_name": "  Rust "},
            headers=auth_headers(jobseeker),
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Skill Rust is added successfully"

    async def test_adding_held_skill_is_idempotent(self, client, jobseeker, db_session):
        headers = auth_headers(jobseeker)
        await client.post(f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=headers)

        response = await client.post(f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["message"] == "User already possesses this skill"
        assert await count_rows(db_session, Skill) == 1
        assert await count_rows(db_session, UserSkill) == 1

    async def test_skill_row_is_shared_between_users(self, client, jobseeker, make_user, db_session):
        other = await make_user()
        await client.post(
            f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=auth_headers(jobseeker)
        )
        await client.post(
            f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=auth_headers(other)
        )

        assert await count_rows(db_session, Skill) == 1
        assert await count_rows(db_session, UserSkill) == 2

    async def test_blank_skill_name_is_rejected(self, client, jobseeker, db_session):
        response = await client.post(
            f"{USERS}/me/skills",
            json={"skill_name": "   "},
            headers=auth_headers(jobseeker),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Please provide a skill name"
        assert await count_rows(db_session, Skill) == 0

    async def test_remove_skill_keeps_skill_row(self, client, jobseeker, db_session):
        headers = auth_headers(jobseeker)
        await client.post(f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=headers)

        response = await client.request(
            "DELETE", f"{USERS}/me/skills", json={"skill_name": "Go"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Skill Go was deleted successfully"
        assert await count_rows(db_session, UserSkill) == 0
        assert await count_rows(db_session, Skill) == 1

    async def test_remove_unheld_skill_is_not_found(self, client, jobseeker):
        response = await client.request(
            "DELETE",
            f"{USERS}/me/skills",
            json={"skill_name": "Cobol"},
            headers=auth_headers(jobseeker),
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Skill Cobol was not found"

    async def test_failed_link_rolls_back_new_skill(
        self, jobseeker, db_session, monkeypatch
    ):
        service = UserService()

        async def broken_link(*args, **kwargs):
            raise RuntimeError("link failed")

        monkeypatch.setattr(service.skill_repo, "link_to_user", broken_link)

        with pytest.raises(RuntimeError):
            await service.add_skill(db_session, jobseeker.user_id, "Haskell")

        result = await db_session.execute(select(Skill).where(Skill.name == "Haskell"))
        assert result.scalar_one_or_none() is None

    async def test_unknown_user_cannot_add_skill(self, db_session):
        service = UserService()

        with pytest.raises(UserNotFoundException) as excinfo:
            await service.add_skill(db_session, 9999, "Go")

        assert excinfo.value.status_code == 404
        assert excinfo.value.message == "User not found."
        assert await count_rows(db_session, Skill) == 0
