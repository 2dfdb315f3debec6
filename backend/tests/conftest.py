import copy
from collections import defaultdict

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from config.constants import ROLE_EMPLOYEE
from config.env import Settings, get_settings
from database import get_store, stamp
from main import app
from utils.jwt import create_access_token


class InMemoryStore:
    """Stand-in for DocumentStore keeping records in dicts."""

    def __init__(self):
        self.collections = defaultdict(dict)
        self.writes = []

    def seed(self, collection: str, record: dict) -> str:
        record_id = str(ObjectId())
        self.collections[collection][record_id] = {"_id": record_id, **stamp(record)}
        return record_id

    def all(self, collection: str) -> list[dict]:
        return list(self.collections[collection].values())

    async def add(self, collection, record):
        self.writes.append(("add", collection))
        return self.seed(collection, record)

    async def get(self, collection, record_id):
        doc = self.collections[collection].get(record_id)
        return copy.deepcopy(doc) if doc else None

    async def query(self, collection, filters, limit=None):
        docs = [
            copy.deepcopy(doc)
            for doc in self.collections[collection].values()
            if all(doc.get(k) == v for k, v in filters.items())
        ]
        return docs[:limit] if limit else docs

    async def list(self, collection, order_by, limit=50):
        docs = sorted(self.collections[collection].values(), key=lambda d: d.get(order_by))
        return copy.deepcopy(docs[:limit])

    async def set(self, collection, record_id, patch, merge=True):
        self.writes.append(("set", collection))
        if merge:
            doc = self.collections[collection].setdefault(record_id, {"_id": record_id})
            doc.update(stamp(patch))
        else:
            self.collections[collection][record_id] = {"_id": record_id, **stamp(patch)}

    async def delete(self, collection, record_id):
        self.writes.append(("delete", collection))
        self.collections[collection].pop(record_id, None)

    async def ping(self):
        return None


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def settings():
    return Settings(jwt_secret="test-secret", legacy_error_status=True)


@pytest.fixture
def client(store, settings):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings
    app.state.legacy_error_status = settings.legacy_error_status

    yield TestClient(app)

    app.dependency_overrides.clear()
    app.state.legacy_error_status = True


@pytest.fixture
def auth_headers(settings):
    token = create_access_token({"id": str(ObjectId()), "role": ROLE_EMPLOYEE}, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def location():
    return {
        "lat": 12.97,
        "long": 77.59,
        "address": "14 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "country": "India",
        "pinCode": 560001,
    }


@pytest.fixture
def customer_body(location):
    return {
        "fullName": "Asha Rao",
        "contactNumber": "9876543210",
        "email": "asha@shopmail.in",
        "password": "s3cret-pass",
        "role": "CUSTOMER",
        "location": location,
    }


@pytest.fixture
def vendor_body(location):
    return {
        "fullName": "Ravi Stores",
        "contactNumber": "9123456780",
        "email": "ravi@shopmail.in",
        "password": "vendor-pass",
        "role": "VENDOR",
        "location": location,
        "profilePic": "https://cdn.shopmail.in/ravi.png",
    }


@pytest.fixture
def product_body():
    return {
        "name": "Milk 2L",
        "manufacturer": "Nandini",
        "brand": "Nandini Gold",
        "vid": "placeholder",
        "images": ["https://cdn.shopmail.in/milk.png"],
        "price": 96,
        "offer": {"name": "Monsoon", "id": "off-1"},
        "qty": {"value": 2, "unit": "L"},
        "description": "Toned milk",
        "features": "Pasteurised",
        "otherNames": ["doodh"],
        "life": "3 days",
        "rating": 4.5,
        "category": "dairy",
    }


@pytest.fixture
def order_body(location):
    return {
        "customerName": "Asha Rao",
        "contact": "9876543210",
        "email": "asha@shopmail.in",
        "cid": "placeholder",
        "location": location,
        "items": [
            {"id": "prod-1", "qty": 2, "price": 96, "name": "Milk 2L", "unit": "L"},
        ],
        "totalCost": 192,
        "offer": {"name": "Monsoon", "id": "off-1"},
        "discount": 10,
        "finalCost": 182,
        "paymentStatus": "PENDING",
        "paymentType": "COD",
        "timeAssigned": "2026-10-19T10:00:00",
    }
