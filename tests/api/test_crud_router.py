"""CRUD Router — verifies hook wiring, declared transaction boundaries and hook failures.

Invariants:
    - Controller hooks wrap service hooks (presentation outside business)
    - A hook raising BusinessRuleError answers 400 and rolls the write back
    - A failed flush answers 503 through the real session dependency and rolls back
    - A controller class may redeclare its transaction mapping
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from crud_architecture.api.error_handlers import register_error_handlers
from crud_architecture.base.controller import ControllerHooks, CrudController
from crud_architecture.base.router import crud_router
from crud_architecture.base.service import ServiceHooks
from crud_architecture.core.domain_types import CrudOperation, TxMode
from crud_architecture.core.errors import BusinessRuleError
from tests.widgets import Widget, WidgetAssembly, WidgetDto

WIDGETS = "/widgets/"


class LoggingControllerHooks(ControllerHooks):
    def __init__(self, log):
        self.log = log

    async def before_find(self):
        self.log.append("controller.before_find")

    async def after_find(self, dtos):
        self.log.append(f"controller.after_find:{len(dtos)}")

    async def before_create(self, dto):
        self.log.append(f"controller.before_create:{dto.name}")

    async def after_create(self):
        self.log.append("controller.after_create")

    async def before_update(self, record_id, dto):
        self.log.append(f"controller.before_update:{record_id}:{dto.name}")

    async def after_update(self):
        self.log.append("controller.after_update")

    async def before_delete(self, record_id):
        self.log.append(f"controller.before_delete:{record_id}")

    async def after_delete(self):
        self.log.append("controller.after_delete")


class LoggingServiceHooks(ServiceHooks):
    def __init__(self, log):
        self.log = log

    async def before_create(self, entity):
        self.log.append("service.before_create")

    async def after_create(self, entity):
        self.log.append(f"service.after_create:{entity.id}")

    async def before_find_by_id(self, record_id):
        self.log.append(f"service.before_find_by_id:{record_id}")

    async def before_update(self, record_id, entity):
        self.log.append(f"service.before_update:{entity.name}")

    async def after_delete(self, record_id):
        self.log.append(f"service.after_delete:{record_id}")


class RejectHeavyWidgets(ServiceHooks):
    """Rejects after the row was flushed, so only a rollback can undo it."""

    async def after_create(self, entity):
        if entity.weight > 10:
            raise BusinessRuleError("widget too heavy")

    async def before_update(self, record_id, entity):
        if entity.weight > 10:
            raise BusinessRuleError("widget too heavy")


class RejectAfterCreate(ControllerHooks):
    async def after_create(self):
        raise BusinessRuleError("created widgets are frozen")


class DropNameBeforeCreate(ServiceHooks):
    """Breaks the NOT NULL constraint on name so the flush fails."""

    async def before_create(self, entity):
        entity.name = None


class DryRunController(CrudController):
    transactions = {
        **CrudController.transactions,
        CrudOperation.CREATE: TxMode.NEVER,
    }


def _app(**router_kwargs) -> FastAPI:
    app = FastAPI()
    app.include_router(crud_router(
        prefix="/widgets",
        dto_type=WidgetDto,
        entity_type=Widget,
        assembly=WidgetAssembly(),
        **router_kwargs,
    ))
    register_error_handlers(app)
    return app


@pytest.fixture
def make_client(override_db):
    def make(**router_kwargs) -> AsyncClient:
        app = override_db(_app(**router_kwargs))
        return AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )

    return make


async def test_hooks_run_in_layer_order(make_client):
    log = []
    client = make_client(
        controller_hooks=LoggingControllerHooks(log),
        service_hooks=LoggingServiceHooks(log),
    )
    async with client:
        await client.post(WIDGETS, json={"name": "w", "weight": 2})
        await client.get(WIDGETS)
        await client.put(f"{WIDGETS}1", json={"name": "v", "weight": 3})
        await client.delete(f"{WIDGETS}1")

    assert log == [
        "controller.before_create:w",
        "service.before_create",
        "service.after_create:1",
        "controller.after_create",
        "controller.before_find",
        "controller.after_find:1",
        "controller.before_update:1:v",
        "service.before_find_by_id:1",
        "service.before_update:v",
        "controller.after_update",
        "controller.before_delete:1",
        "service.after_delete:1",
        "controller.after_delete",
    ]


def test_router_exposes_four_routes():
    paths = _app().openapi()["paths"]
    assert {"get", "post"} <= set(paths[WIDGETS])
    assert {"put", "delete"} <= set(paths[f"{WIDGETS}{{id}}"])


async def test_update_replaces_every_mapped_field(make_client):
    client = make_client()
    async with client:
        await client.post(WIDGETS, json={"name": "w", "color": "red", "weight": 1})
        await client.put(f"{WIDGETS}1", json={"name": "w2", "weight": 5})
        body = (await client.get(WIDGETS)).json()

    assert body == [{
        "id": 1, "name": "w2", "color": None, "weight": 5, "label": None,
    }]


async def test_hook_rejection_returns_400_and_rolls_back_create(make_client):
    client = make_client(service_hooks=RejectHeavyWidgets())
    async with client:
        res = await client.post(WIDGETS, json={"name": "anvil", "weight": 50})
        listed = (await client.get(WIDGETS)).json()

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BUSINESS_RULE_VIOLATED"
    assert listed == []


async def test_hook_rejection_leaves_stored_record_untouched(make_client):
    client = make_client(service_hooks=RejectHeavyWidgets())
    async with client:
        await client.post(WIDGETS, json={"name": "feather", "weight": 1})
        res = await client.put(f"{WIDGETS}1", json={"name": "anvil", "weight": 50})
        listed = (await client.get(WIDGETS)).json()

    assert res.status_code == 400
    assert [(w["name"], w["weight"]) for w in listed] == [("feather", 1)]


async def test_redeclared_transaction_mode_is_applied(make_client):
    client = make_client(controller_class=DryRunController)
    async with client:
        res = await client.post(WIDGETS, json={"name": "draft"})
        listed = (await client.get(WIDGETS)).json()

    assert res.status_code == 204
    assert listed == []


async def test_controller_hook_rejection_rolls_back_create(make_client):
    client = make_client(controller_hooks=RejectAfterCreate())
    async with client:
        res = await client.post(WIDGETS, json={"name": "w"})
        listed = (await client.get(WIDGETS)).json()

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BUSINESS_RULE_VIOLATED"
    assert listed == []


async def test_flush_failure_returns_503_and_rolls_back(override_db):
    # No dependency override: the request runs on db_manager.session(),
    # which maps the IntegrityError raised by the flush.
    app = _app(service_hooks=DropNameBeforeCreate())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as client:
        res = await client.post(WIDGETS, json={"name": "w"})
        listed = (await client.get(WIDGETS)).json()

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    assert listed == []
