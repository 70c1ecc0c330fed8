"""Shared test fixtures and configuration."""
import httpx
import pytest
from fastapi.testclient import TestClient

from cupcake_corner.main import app
from cupcake_corner.core.dependencies import get_order_client
from cupcake_corner.services.order_session import manager
from cupcake_corner.services.order_session.models import OrderSession
from cupcake_corner.services.ordering.client import OrderClient
from cupcake_corner.services.ordering.models import Order


TEST_ENDPOINT_URL = "http://orders.test/api/cupcakes"


@pytest.fixture
def example_order_json():
    """Wire body of the example order."""
    return (
        '{"type":1,"quantity":5,"extraFrosting":true,"addSprinkles":false,'
        '"name":"A","address":"B","city":"C","zipcode":"D"}'
    )


@pytest.fixture
def example_order():
    """The order used throughout the wire-format examples."""
    return Order(
        type=1,
        quantity=5,
        extraFrosting=True,
        addSprinkles=False,
        name="A",
        address="B",
        city="C",
        zipcode="D",
    )


@pytest.fixture
def posted_requests():
    """Requests seen by the mocked order endpoint."""
    return []


@pytest.fixture
def echo_handler(posted_requests):
    """Mock endpoint handler that echoes the posted body back."""
    def _echo(request: httpx.Request) -> httpx.Response:
        posted_requests.append(request)
        return httpx.Response(
            201,
            content=request.content,
            headers={"Content-Type": "application/json"},
        )
    return _echo


@pytest.fixture
def make_order_client():
    """Build an order client whose requests go to the given handler."""
    def _make(handler) -> OrderClient:
        return OrderClient(
            endpoint_url=TEST_ENDPOINT_URL,
            transport=httpx.MockTransport(handler),
        )
    return _make


@pytest.fixture
def echo_client(make_order_client, echo_handler):
    """Order client backed by the echoing mock endpoint."""
    return make_order_client(echo_handler)


@pytest.fixture
def filled_session():
    """Session whose form holds the example order."""
    session = OrderSession()
    session.form.update(
        type=1,
        quantity=5,
        special_requests_enabled=True,
        extra_frosting=True,
        add_sprinkles=False,
        name="A",
        address="B",
        city="C",
        zipcode="D",
    )
    return session


@pytest.fixture(autouse=True)
def clean_order_session():
    """Start every test from a fresh order session."""
    manager.reset_session()
    yield
    manager.reset_session()


@pytest.fixture
def order_endpoint_handler(echo_handler):
    """Handler the API tests' order client talks to; override to change it."""
    return echo_handler


@pytest.fixture
def test_client(make_order_client, order_endpoint_handler):
    """Create FastAPI test client with the order endpoint mocked."""
    app.dependency_overrides[get_order_client] = lambda: make_order_client(order_endpoint_handler)

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def filled_client(test_client):
    """Test client whose form already holds a complete order."""
    test_client.post("/order/flavor", data={"type": "1"})
    test_client.post("/order/quantity/increment")
    test_client.post("/order/quantity/increment")
    test_client.post("/order/special-requests", data={"enabled": "true"})
    test_client.post("/order/extras", data={"extra_frosting": "true"})
    test_client.post(
        "/order/contact",
        data={"name": "A", "address": "B", "city": "C", "zipcode": "D"},
    )
    return test_client
