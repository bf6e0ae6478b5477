import asyncio
import os
import tempfile

import pytest

# storefront.core.config reads the environment at import time
_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")

os.environ["APP_ENV"] = "development"
os.environ["DB_TYPE"] = "sqlite"
os.environ["SQLITE_PATH"] = os.path.join(_TMP_DIR, "test.db")
os.environ["ADMIN_PASSWORD"] = "s3cret-pass"
os.environ["ADMIN_PASSWORD_HASH"] = ""
os.environ["SESSION_SECRET_KEY"] = "test-session-secret"
os.environ["WHATSAPP_PHONE"] = "+52 (664) 123-4567"
os.environ["STORE_NAME"] = "Jackie Crocs"

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from storefront.core.db import AsyncSessionLocal, reset_models  # noqa: E402
from storefront.models.catalog.color_models import Color  # noqa: E402
from storefront.models.catalog.location_models import Location  # noqa: E402
from storefront.models.catalog.shoe_model_models import ShoeModel  # noqa: E402
from storefront.models.catalog.size_models import Size  # noqa: E402

ADMIN_PASSWORD = "s3cret-pass"

SIZE_LABELS = ["C8", "J2", "M8-W10", "M10-W12"]


async def _seed_lookups() -> dict:
    async with AsyncSessionLocal() as db:
        locations = [
            Location(slug="tijuana", name="Tijuana"),
            Location(slug="rosarito", name="Rosarito"),
        ]
        sizes = [Size(label=label, sort_order=i * 10) for i, label in enumerate(SIZE_LABELS)]
        models = [ShoeModel(name="Classic")]
        colors = [Color(name_en="Black"), Color(name_en="Pink")]

        db.add_all(locations + sizes + models + colors)
        await db.flush()

        ids = {
            "locations": {loc.slug: loc.id for loc in locations},
            "sizes": {size.label: size.id for size in sizes},
            "models": {model.name: model.id for model in models},
            "colors": {color.name_en: color.id for color in colors},
        }
        await db.commit()
        return ids


@pytest.fixture
def reset_db():
    asyncio.run(reset_models())


@pytest.fixture
def client(reset_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lookups(reset_db):
    return asyncio.run(_seed_lookups())


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client


@pytest.fixture
def add_pairs(admin_client, lookups):
    """POST pairs through the admin API; returns the created ids."""

    def _add(
        *,
        model="Classic",
        color="Black",
        size="M8-W10",
        location="tijuana",
        price=450,
        quantity=1,
    ) -> list[int]:
        resp = admin_client.post(
            "/api/admin/inventory",
            json={
                "model_name": model,
                "color": color,
                "size_id": lookups["sizes"][size],
                "price_mxn": price,
                "quantity": quantity,
                "location_id": lookups["locations"][location],
            },
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]["ids"]

    return _add
