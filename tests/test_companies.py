"""
Tests for company routes: creation with logo upload, lookup and deletion.
"""
import httpx
import pytest
from sqlalchemy import select

from app.api.routes import companies as company_routes
from app.models import Company, Job
from tests.conftest import auth_headers, count_rows

COMPANIES = "/api/v1/companies/"

LOGO = {"file": ("logo.png", b"\x89PNG fake image bytes", "image/png")}


def company_form(**overrides):
    form = {
        "name": "Acme",
        "description": "Rockets and anvils",
        "website": "https://acme.example.com",
    }
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not None}


class TestCreateCompany:
    async def test_create_company_success(self, client, recruiter, uploader, db_session):
        response = await client.post(
            COMPANIES,
            data=company_form(),
            files=LOGO,
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Company created successfully"
        assert body["company"]["name"] == "Acme"
        assert body["company"]["recruiter_id"] == recruiter.user_id
        assert body["company"]["logo"] == "https://cdn.example.com/assets/1"
        assert body["company"]["logo_public_id"] == "asset-1"

        assert len(uploader.calls) == 1
        assert uploader.calls[0]["buffer"].startswith("data:image/png;base64,")
        assert uploader.calls[0]["public_id"] is None

        stored = (await db_session.execute(select(Company))).scalar_one()
        assert stored.name == "Acme"

    @pytest.mark.parametrize("missing", ["name", "description", "website"])
    async def test_missing_field_is_rejected(self, client, recruiter, uploader, db_session, missing):
        response = await client.post(
            COMPANIES,
            data=company_form(**{missing: None}),
            files=LOGO,
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 400
        assert missing in response.json()["message"]
        assert uploader.calls == []
        assert await count_rows(db_session, Company) == 0

    async def test_missing_logo_is_rejected(self, client, recruiter, uploader, db_session):
        response = await client.post(
            COMPANIES,
            data=company_form(),
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Company Logo file is required"
        assert uploader.calls == []
        assert await count_rows(db_session, Company) == 0

    async def test_duplicate_name_conflicts(self, client, recruiter, make_company):
        await make_company(recruiter, name="Acme")

        response = await client.post(
            COMPANIES,
            data=company_form(),
            files=LOGO,
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 409
        assert response.json() == {
            "error": "COMPANY_EXISTS",
            "message": "A company with the name Acme already exists",
        }

    async def test_name_taken_after_check_conflicts(
        self, client, recruiter, make_company, db_session, monkeypatch
    ):
        await make_company(recruiter, name="Acme")

        async def name_is_free(db, name):
            return False

        monkeypatch.setattr(
            company_routes.company_service.company_repo, "name_exists", name_is_free
        )

        response = await client.post(
            COMPANIES,
            data=company_form(),
            files=LOGO,
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 409
        assert response.json() == {
            "error": "COMPANY_EXISTS",
            "message": "A company with the name Acme already exists",
        }
        assert await count_rows(db_session, Company) == 1

    async def test_jobseeker_cannot_create_company(self, client, jobseeker, db_session):
        response = await client.post(
            COMPANIES,
            data=company_form(),
            files=LOGO,
            headers=auth_headers(jobseeker),
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Forbidden: Only recruiter can create a company"
        assert await count_rows(db_session, Company) == 0

    async def test_requires_authentication(self, client):
        response = await client.post(COMPANIES, data=company_form(), files=LOGO)

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"

    async def test_empty_logo_file_is_server_error(self, client, recruiter, uploader, db_session):
        response = await client.post(
            COMPANIES,
            data=company_form(),
            files={"file": ("logo.png", b"", "image/png")},
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Failed to create file buffer"
        assert uploader.calls == []
        assert await count_rows(db_session, Company) == 0

    async def test_upload_failure_creates_nothing(self, client, recruiter, uploader, db_session):
        uploader.error = httpx.ConnectError("upload service unreachable")

        response = await client.post(
            COMPANIES,
            data=company_form(),
            files=LOGO,
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "internal_error",
            "message": "An unexpected error occurred",
        }
        assert await count_rows(db_session, Company) == 0


class TestReadCompanies:
    async def test_list_my_companies(self, client, recruiter, other_recruiter, make_company):
        mine = await make_company(recruiter)
        await make_company(other_recruiter)

        response = await client.get(COMPANIES, headers=auth_headers(recruiter))

        assert response.status_code == 200
        assert [c["company_id"] for c in response.json()] == [mine.company_id]

    async def test_company_details_include_jobs(self, client, recruiter, make_company, make_job):
        company = await make_company(recruiter)
        job = await make_job(company)

        response = await client.get(f"{COMPANIES}{company.company_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == company.name
        assert [j["job_id"] for j in body["jobs"]] == [job.job_id]

    async def test_company_without_jobs_has_empty_list(self, client, recruiter, make_company):
        company = await make_company(recruiter)

        response = await client.get(f"{COMPANIES}{company.company_id}")

        assert response.status_code == 200
        assert response.json()["jobs"] == []

    async def test_unknown_company_is_not_found(self, client):
        response = await client.get(f"{COMPANIES}9999")

        assert response.status_code == 404
        assert response.json()["error"] == "COMPANY_NOT_FOUND"

    async def test_non_numeric_id_is_bad_request(self, client):
        response = await client.get(f"{COMPANIES}abc")

        assert response.status_code == 400
        assert "company_id" in response.json()["message"]

    @pytest.mark.parametrize("company_id", ["0", "-1", "2147483648", "99999999999999999999"])
    async def test_out_of_range_id_is_bad_request(self, client, company_id):
        response = await client.get(f"{COMPANIES}{company_id}")

        assert response.status_code == 400
        assert response.json()["message"] == "Missing or invalid fields: company_id"

    async def test_largest_id_is_a_plain_miss(self, client):
        response = await client.get(f"{COMPANIES}2147483647")

        assert response.status_code == 404


class TestDeleteCompany:
    async def test_owner_deletes_company_and_its_jobs(
        self, client, recruiter, make_company, make_job, db_session
    ):
        company = await make_company(recruiter)
        await make_job(company)
        await make_job(company, title="Frontend Engineer")

        response = await client.delete(
            f"{COMPANIES}{company.company_id}",
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Company and all associated jobs have been deleted"
        assert await count_rows(db_session, Company) == 0
        assert await count_rows(db_session, Job) == 0

    async def test_non_owner_gets_not_found(
        self, client, recruiter, other_recruiter, make_company, db_session
    ):
        company = await make_company(recruiter)

        response = await client.delete(
            f"{COMPANIES}{company.company_id}",
            headers=auth_headers(other_recruiter),
        )

        assert response.status_code == 404
        assert response.json()["message"] == (
            "Company not found or you're not authorized to delete it."
        )
        assert await db_session.get(Company, company.company_id) is not None

    async def test_missing_company_gets_same_not_found(self, client, recruiter):
        response = await client.delete(f"{COMPANIES}9999", headers=auth_headers(recruiter))

        assert response.status_code == 404
        assert response.json()["message"] == (
            "Company not found or you're not authorized to delete it."
        )
