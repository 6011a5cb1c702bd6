import pytest

from ebookshelf.memory import InMemoryBookRepository
from ebookshelf.service import CatalogService
from ebookshelf.settings import Settings


@pytest.fixture
def repo():
    return InMemoryBookRepository()


@pytest.fixture
def service(repo):
    return CatalogService(repo)


@pytest.fixture
def settings(tmp_path):
    return Settings(activity_log_path=str(tmp_path / "activity.log"))


@pytest.fixture
def settings_file(tmp_path):
    """Settings JSON file pointing the activity log into tmp_path."""
    path = tmp_path / "settings.json"
    path.write_text(
        '{"activity_log_path": "%s", "max_rows": 50}' % (tmp_path / "activity.log")
    )
    return path


@pytest.fixture
def books_csv(tmp_path):
    path = tmp_path / "books.csv"
    path.write_text(
        "Title,Author,Category,Format\n"
        "Cien años de soledad,García Márquez,Novel,EPUB\n"
        "  Dune  ,Frank Herbert,Science Fiction,PDF\n"
        ",Nameless Author,Poetry,MOBI\n"
        "Orphan Title,,,\n"
        "Neuromancer,William Gibson,,\n",
        encoding="utf-8",
    )
    return path
