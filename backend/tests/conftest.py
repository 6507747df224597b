from __future__ import annotations

from collections import Counter
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_hub.core.auth import create_access_token
from employee_hub.core.dependencies import get_employee_client, get_employee_store
from employee_hub.core.exceptions import NotFoundError
from employee_hub.main import app
from employee_hub.models.auth import UserInfo
from employee_hub.models.employee import Employee, EmployeeFormData
from employee_hub.services.employee_store import EmployeeStore

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class InMemoryEmployeeClient:
    """Stands in for the remote collection; counts calls and can be told to fail."""

    def __init__(self, employees: list[Employee] | None = None) -> None:
        self.records: dict[int, Employee] = {e.id: e for e in employees or []}
        self.next_id = max(self.records, default=0) + 1
        self.initialized = True
        self.calls: Counter[str] = Counter()
        self.failures: dict[str, Exception] = {}

    def _enter(self, operation: str) -> None:
        self.calls[operation] += 1
        if operation in self.failures:
            raise self.failures[operation]

    async def list_all(self) -> list[Employee]:
        self._enter("list_all")
        return list(self.records.values())

    async def get_by_id(self, employee_id: int) -> Employee:
        self._enter("get_by_id")
        if employee_id not in self.records:
            raise NotFoundError(employee_id)
        return self.records[employee_id]

    async def create(self, data: EmployeeFormData) -> Employee:
        self._enter("create")
        employee = Employee(id=self.next_id, **data.model_dump())
        self.records[employee.id] = employee
        self.next_id += 1
        return employee

    async def replace(self, employee_id: int, data: EmployeeFormData) -> Employee:
        self._enter("replace")
        if employee_id not in self.records:
            raise NotFoundError(employee_id)
        employee = Employee(id=employee_id, **data.model_dump())
        self.records[employee_id] = employee
        return employee

    async def delete(self, employee_id: int) -> None:
        self._enter("delete")
        if employee_id not in self.records:
            raise NotFoundError(employee_id)
        del self.records[employee_id]

    async def check_connection(self) -> bool:
        return True


def make_employee(employee_id: int, full_name: str, **overrides: object) -> Employee:
    fields: dict[str, object] = {
        "id": employee_id,
        "full_name": full_name,
        "gender": "Male",
        "date_of_birth": date(1990, 5, 15),
        "profile_image": "",
        "state": "Karnataka",
        "is_active": True,
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [
        make_employee(1, "Rahul Sharma", gender="Male", state="Maharashtra", is_active=True),
        make_employee(2, "Priya Patel", gender="Female", state="Gujarat", is_active=True),
        make_employee(3, "Amit Kumar", gender="Male", state="Maharashtra", is_active=False),
        make_employee(4, "Sneha Reddy", gender="Female", state="Telangana", is_active=True),
        make_employee(5, "Alex Rao", gender="Other", state="Karnataka", is_active=False),
    ]


@pytest.fixture
def form_data() -> EmployeeFormData:
    return EmployeeFormData(
        full_name="Kavya Nair",
        gender="Female",
        date_of_birth=date(1994, 2, 3),
        state="Kerala",
        is_active=True,
    )


@pytest.fixture
def remote(sample_employees) -> InMemoryEmployeeClient:
    return InMemoryEmployeeClient(sample_employees)


@pytest.fixture
def store(remote) -> EmployeeStore:
    return EmployeeStore(remote)


@pytest.fixture(autouse=True)
def _app_settings():
    from employee_hub.core.config import settings

    original_secret = settings.AUTH_SECRET_KEY
    original_latency = settings.AUTH_LATENCY_SECONDS
    settings.AUTH_SECRET_KEY = TEST_SECRET_KEY
    settings.AUTH_LATENCY_SECONDS = 0.0
    yield
    settings.AUTH_SECRET_KEY = original_secret
    settings.AUTH_LATENCY_SECONDS = original_latency


@pytest.fixture
def mock_user() -> UserInfo:
    return UserInfo(id=1, email="admin@company.com", name="Admin User")


@pytest.fixture
def auth_headers(mock_user) -> dict[str, str]:
    token = create_access_token(mock_user, TEST_SECRET_KEY, ttl_minutes=5)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(remote, store):
    app.dependency_overrides[get_employee_client] = lambda: remote
    app.dependency_overrides[get_employee_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(remote, store):
    app.dependency_overrides[get_employee_client] = lambda: remote
    app.dependency_overrides[get_employee_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
