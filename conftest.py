"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import json
from typing import Any, Dict

import pytest

from worklog.config import WorklogConfig, reload_config, reset_logging
from worklog.models import ClientRef, JobRef, ProjectRef, ServiceRef, TaskRef, TimeEntry

UTC = dt.timezone.utc


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'TIMEZONE': 'Asia/Bangkok',
        'WORK_HOURS_TARGET': '8',
        'INCLUDE_EMPTY_DAYS': 'false',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    for key in ('LOG_FILE', 'LOG_FORMAT', 'LOG_CONSOLE'):
        monkeypatch.delenv(key, raising=False)

    # Clear the global config to force reload with test values
    import worklog.config.settings
    worklog.config.settings._config = None

    yield test_env_vars

    # Clean up
    worklog.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> WorklogConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Drop handlers that commands attach to the root logger."""
    yield
    reset_logging()


@pytest.fixture
def acme():
    return ClientRef(id='c-acme', name='Acme Corp')


@pytest.fixture
def globex():
    return ClientRef(id='c-globex', name='Globex')


@pytest.fixture
def make_entry(acme):
    """Factory for TimeEntry objects with sensible defaults.

    Example:
        entry = make_entry(entry_date=dt.date(2025, 1, 15), duration_minutes=90)
    """
    counter = {'n': 0}

    def _make(
        entry_date: dt.date = dt.date(2025, 1, 15),
        duration_minutes: int = 60,
        client: ClientRef = None,
        user_id: str = 'u1',
        notes: str = None,
        created_at: dt.datetime = None,
        job_name: str = 'Annual audit',
        job_no: str = 'J-100',
        project_name: str = 'Audit 2025',
        service_name: str = 'Consulting',
        task_name: str = None,
        **overrides: Any,
    ) -> TimeEntry:
        counter['n'] += 1
        n = counter['n']
        client = client or acme
        if created_at is None:
            created_at = dt.datetime.combine(entry_date, dt.time(8), tzinfo=UTC) + dt.timedelta(minutes=n)
        fields = dict(
            id=f'e{n}',
            user_id=user_id,
            job=JobRef(
                id=f'j-{client.id}',
                name=job_name,
                job_no=job_no,
                project=ProjectRef(id=f'p-{client.id}', name=project_name, client=client),
            ),
            service=ServiceRef(id='s1', name=service_name),
            task=TaskRef(id='t1', name=task_name) if task_name else None,
            duration_minutes=duration_minutes,
            entry_date=entry_date,
            notes=notes,
            created_at=created_at,
        )
        fields.update(overrides)
        return TimeEntry(**fields)

    return _make


@pytest.fixture
def entry_record() -> Dict[str, Any]:
    """A raw entry record as exported from the data store."""
    return {
        'id': 'e-raw-1',
        'user_id': 'u1',
        'entry_date': '2025-01-15',
        'duration_minutes': 90,
        'created_at': '2025-01-15T09:00:00+07:00',
        'notes': 'Quarterly review prep',
        'deleted_at': None,
        'job': {
            'id': 'j1',
            'name': 'Annual audit',
            'job_no': 'J-100',
            'project': {
                'id': 'p1',
                'name': 'Audit 2025',
                'client': {'id': 'c-acme', 'name': 'Acme Corp'},
            },
        },
        'service': {'id': 's1', 'name': 'Consulting'},
        'task': None,
    }


@pytest.fixture
def entries_file(tmp_path, entry_record):
    """A JSON entry export covering one week of January 2025 for two users."""
    globex_job = {
        'id': 'j2',
        'name': 'Website relaunch',
        'job_no': 'J-200',
        'project': {
            'id': 'p2',
            'name': 'Relaunch',
            'client': {'id': 'c-globex', 'name': 'Globex'},
        },
    }
    records = [
        entry_record,
        {**entry_record, 'id': 'e2', 'entry_date': '2025-01-13', 'duration_minutes': 240,
         'created_at': '2025-01-13T10:00:00+07:00', 'notes': 'Fieldwork'},
        {**entry_record, 'id': 'e3', 'entry_date': '2025-01-15', 'duration_minutes': 180,
         'created_at': '2025-01-15T14:00:00+07:00', 'notes': None, 'job': globex_job},
        {**entry_record, 'id': 'e4', 'user_id': 'u2', 'entry_date': '2025-01-15',
         'duration_minutes': 480, 'created_at': '2025-01-15T18:00:00+07:00'},
        {**entry_record, 'id': 'e5', 'entry_date': '2025-01-14', 'duration_minutes': 60,
         'deleted_at': '2025-01-14T12:00:00+07:00'},
    ]
    path = tmp_path / 'entries.json'
    path.write_text(json.dumps(records), encoding='utf-8')
    return path


@pytest.fixture
def members_file(tmp_path):
    """A JSON team member export."""
    members = [
        {'id': 'u1', 'email': 'somchai@example.com', 'display_name': 'Somchai'},
        {'id': 'u2', 'email': 'anong@example.com', 'display_name': 'Anong'},
        {'id': 'u3', 'email': 'mali@example.com', 'department_name': 'Tax'},
    ]
    path = tmp_path / 'members.json'
    path.write_text(json.dumps(members), encoding='utf-8')
    return path


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising a CLI command"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        path = str(item.fspath)
        if "tests/unit/" in path:
            item.add_marker(pytest.mark.unit)

        if "tests/unit/cli/" in path:
            item.add_marker(pytest.mark.cli)
