"""Shared fixtures: a throwaway SQLite database per test and an ASGI client bound to it."""
from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio

from lesson_service.config import Settings
from lesson_service.database import Database
from lesson_service.main import create_app
from lesson_service.models import order  # noqa: F401  registers orders tables on Base.metadata
from lesson_service.models.lesson import Base, Lesson


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'lessons.db'}",
        static_dir=tmp_path / "image",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    db = Database(test_settings.sqlalchemy_url)
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def lessons(database):
    """Three lessons keyed by subject."""
    seeded = {
        "math": Lesson(title="Algebra", location="Hendon", price=100.0, subject="Math",
                       image="math.png", total_inventory=5, available_inventory=5),
        "art": Lesson(title="Oil Painting", location="Golders Green", price=95.0, subject="Art",
                      image="art.png", total_inventory=4, available_inventory=2),
        "music": Lesson(title="Piano", location="Hendon Central", price=120.0, subject="Music",
                        total_inventory=3, available_inventory=3),
    }
    async with database.sessionmaker() as session:
        session.add_all(seeded.values())
        await session.commit()
    return seeded


@pytest_asyncio.fixture
async def client(database, test_settings):
    app = create_app(test_settings)
    # Lifespan does not run under ASGITransport, so do its work here
    test_settings.static_dir.mkdir(parents=True, exist_ok=True)
    app.state.database = database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def read_available(database):
    """Read a lesson's available inventory through a fresh session."""
    async def _read(lesson: Lesson) -> int:
        async with database.sessionmaker() as session:
            fresh = await session.get(Lesson, lesson.id)
            return fresh.available_inventory
    return _read
