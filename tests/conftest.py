"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- In-memory SQLite database (foreign keys on) per test
- HTTP client against the ASGI app with overridden dependencies
- Fake upload service and notification publisher
- Factories for users, companies, jobs and applications
"""
import itertools
import os

# Must be set before app settings are first loaded
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.main import app
from app.models import Application, Company, Job, User, UserRole
from app.schemas.upload import UploadResult
from app.services.notification_service import get_publisher
from app.services.upload_service import get_upload_client

SQLALCHEMY_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

_counter = itertools.count(1)


class FakeUploadClient:
    """Stands in for the upload microservice."""

    def __init__(self):
        self.calls = []
        self.error = None

    async def upload(self, buffer, public_id=None):
        self.calls.append({"buffer": buffer, "public_id": public_id})
        if self.error is not None:
            raise self.error
        n = len(self.calls)
        return UploadResult(
            url=f"https://cdn.example.com/assets/{n}",
            public_id=public_id or f"asset-{n}",
        )


class FakePublisher:
    """Records notifications instead of talking to a broker."""

    def __init__(self):
        self.sent = []

    def notify_application_status(self, to, job_title):
        self.sent.append({"to": to, "job_title": job_title})
        return True


@pytest.fixture
async def engine():
    engine = create_async_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_maker):
    """Session for arranging data and asserting on stored rows."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def uploader():
    return FakeUploadClient()


@pytest.fixture
def publisher():
    return FakePublisher()


@pytest.fixture
async def client(session_maker, uploader, publisher):
    """
    HTTP client with overridden database, upload and publisher dependencies.

    Each request gets its own session, like production.
    """
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_client] = lambda: uploader
    app.dependency_overrides[get_publisher] = lambda: publisher

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


def auth_headers(user):
    token = create_access_token({"sub": str(user.user_id)})
    return {"Authorization": f"Bearer {token}"}


async def count_rows(session, model):
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


@pytest.fixture
def make_user(session_maker):
    async def _make(role=UserRole.JOBSEEKER, **kwargs):
        n = next(_counter)
        async with session_maker() as session:
            user = User(
                name=kwargs.pop("name", f"User {n}"),
                email=kwargs.pop("email", f"user{n}@example.com"),
                role=role.value,
                **kwargs,
            )
            session.add(user)
            await session.commit()
            return user

    return _make


@pytest.fixture
def make_company(session_maker):
    async def _make(recruiter, **kwargs):
        n = next(_counter)
        async with session_maker() as session:
            company = Company(
                name=kwargs.pop("name", f"Company {n}"),
                description=kwargs.pop("description", "We build things"),
                website=kwargs.pop("website", f"https://company{n}.example.com"),
                logo=kwargs.pop("logo", f"https://cdn.example.com/logo{n}.png"),
                logo_public_id=kwargs.pop("logo_public_id", f"logo-{n}"),
                recruiter_id=recruiter.user_id,
                **kwargs,
            )
            session.add(company)
            await session.commit()
            return company

    return _make


@pytest.fixture
def make_job(session_maker):
    async def _make(company, **kwargs):
        async with session_maker() as session:
            job = Job(
                title=kwargs.pop("title", "Backend Engineer"),
                description=kwargs.pop("description", "Build APIs"),
                salary=kwargs.pop("salary", 90000),
                location=kwargs.pop("location", "Berlin"),
                role=kwargs.pop("role", "Engineering"),
                job_type=kwargs.pop("job_type", "Full-time"),
                work_location=kwargs.pop("work_location", "On-site"),
                openings=kwargs.pop("openings", 2),
                company_id=company.company_id,
                posted_by_recruiter_id=company.recruiter_id,
                **kwargs,
            )
            session.add(job)
            await session.commit()
            return job

    return _make


@pytest.fixture
def make_application(session_maker):
    async def _make(job, applicant, **kwargs):
        async with session_maker() as session:
            application = Application(
                job_id=job.job_id,
                applicant_id=applicant.user_id,
                applicant_email=applicant.email,
                resume=applicant.resume or "https://cdn.example.com/resume.pdf",
                **kwargs,
            )
            session.add(application)
            await session.commit()
            return application

    return _make


@pytest.fixture
async def recruiter(make_user):
    return await make_user(UserRole.RECRUITER, name="Rita Recruiter")


@pytest.fixture
async def other_recruiter(make_user):
    return await make_user(UserRole.RECRUITER, name="Otto Other")


@pytest.fixture
async def jobseeker(make_user):
    return await make_user(
        UserRole.JOBSEEKER,
        name="Jo Seeker",
        resume="https://cdn.example.com/jo.pdf",
        resume_public_id="resume-jo",
    )
