from concurrent.futures import ThreadPoolExecutor

import pytest
import respx
from httpx import Response
from wit_client import (
    Entity,
    EntityValue,
    MessageRequest,
    Wit,
    WitHTTPError,
    WitInvalidRequestError,
)

BASE = "https://api.wit.ai"


@pytest.fixture
def wit():
    return Wit("mock-token")


@respx.mock
def test_entity_by_builtin_id(wit):
    route = respx.get(f"{BASE}/entities/wit%24temperature").mock(
        return_value=Response(
            200, json={"builtin": True, "doc": "d", "id": "wit$temperature"}
        )
    )

    with wit:
        entity = wit.entity("wit$temperature")

    assert route.calls[0].request.url.raw_path.startswith(
        b"/entities/wit%24temperature?"
    )
    assert entity == Entity(builtin=True, doc="d", id="wit$temperature")


@respx.mock
def test_entities_listing(wit):
    respx.get(f"{BASE}/entities").mock(
        return_value=Response(200, json=["wit$a", "wit$b"])
    )

    with wit:
        assert wit.entities() == ["wit$a", "wit$b"]


@respx.mock
def test_message_datetime_grain(wit):
    respx.get(f"{BASE}/message").mock(
        return_value=Response(
            200,
            json={
                "msg_id": "1",
                "_text": "tomorrow",
                "outcomes": [
                    {
                        "_text": "tomorrow",
                        "intent": "schedule",
                        "entities": {
                            "datetime": [
                                {
                                    "type": "interval",
                                    "from": {"value": "2015-12-01", "grain": "day"},
                                    "to": {"value": "2015-12-02", "grain": "day"},
                                }
                            ]
                        },
                    }
                ],
            },
        )
    )

    with wit:
        message = wit.message(MessageRequest(query="tomorrow"))

    assert message.outcomes[0].entities["datetime"][0].from_.grain == "day"


@respx.mock
def test_delete_entity_value_exp_path(wit):
    route = respx.delete(
        f"{BASE}/entities/favorite_city/values/Paris/expressions/City%20of%20Light"
    ).mock(return_value=Response(200, json={}))

    with wit:
        wit.delete_entity_value_exp("favorite_city", "Paris", "City of Light")

    assert b"City%20of%20Light" in route.calls[0].request.url.raw_path


@respx.mock
def test_non_200_returns_no_object(wit):
    respx.get(f"{BASE}/messages/abc").mock(return_value=Response(404))

    result = None
    with wit:
        with pytest.raises(WitHTTPError) as exc:
            result = wit.messages("abc")

    assert result is None
    assert str(exc.value) == "Not Found"


@respx.mock(assert_all_called=False)
def test_audio_message_without_source(wit):
    route = respx.post(f"{BASE}/speech").mock(return_value=Response(200, json={}))

    with wit:
        with pytest.raises(WitInvalidRequestError):
            wit.audio_message(MessageRequest(content_type="audio/wav"))

    assert not route.called


@respx.mock
def test_facade_covers_write_operations(wit):
    created = respx.post(f"{BASE}/entities").mock(
        return_value=Response(200, json={"id": "favorite_city"})
    )
    updated = respx.put(f"{BASE}/entities/favorite_city").mock(
        return_value=Response(200, json={"id": "favorite_city", "doc": "new"})
    )
    value_added = respx.post(f"{BASE}/entities/favorite_city/values").mock(
        return_value=Response(200, json={"id": "favorite_city", "values": [{"value": "Oslo"}]})
    )
    exp_added = respx.post(
        f"{BASE}/entities/favorite_city/values/Oslo/expressions"
    ).mock(return_value=Response(200, json={"id": "favorite_city"}))
    value_deleted = respx.delete(f"{BASE}/entities/favorite_city/values/Oslo").mock(
        return_value=Response(200, json={})
    )
    deleted = respx.delete(f"{BASE}/entities/favorite_city").mock(
        return_value=Response(200, json={})
    )
    intents = respx.get(f"{BASE}/intents").mock(return_value=Response(200, json=[]))

    with wit:
        assert wit.create_entity(Entity(id="favorite_city")).id == "favorite_city"
        assert wit.update_entity(Entity(id="favorite_city", doc="new")).doc == "new"
        entity = wit.create_entity_value("favorite_city", EntityValue(value="Oslo"))
        assert entity.find_value("Oslo") is not None
        wit.create_entity_value_exp("favorite_city", "Oslo", "Fjords")
        wit.delete_entity_value("favorite_city", "Oslo")
        wit.delete_entity("favorite_city")
        assert wit.intents() == []

    for route in (created, updated, value_added, exp_added, value_deleted, deleted, intents):
        assert route.call_count == 1


@respx.mock
def test_concurrent_reads_do_not_cross_contaminate(wit):
    def respond(request):
        entity_id = request.url.path.rsplit("/", 1)[-1]
        return Response(200, json={"id": entity_id, "doc": f"doc for {entity_id}"})

    respx.get(url__regex=rf"^{BASE}/entities/.+").mock(side_effect=respond)

    ids = [f"wit${name}" for name in ("a", "b", "c", "d", "e", "f", "g", "h")] * 4
    with wit:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(wit.entity, ids))

    for requested, entity in zip(ids, results):
        assert entity.id == requested
        assert entity.doc == f"doc for {requested}"


def test_separate_instances_keep_their_own_credentials():
    first = Wit("token-one")
    second = Wit("token-two")

    with respx.mock:
        route = respx.get(f"{BASE}/intents").mock(return_value=Response(200, json=[]))
        first.intents()
        second.intents()

        sent = [call.request.headers["Authorization"] for call in route.calls]
        assert sent == ["Bearer token-one", "Bearer token-two"]

    first.close()
    second.close()


def test_from_env(monkeypatch):
    monkeypatch.setenv("WIT_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("WIT_BASE_URL", "https://wit.example.com/")

    wit = Wit.from_env(use_dotenv=False)

    assert wit.client.base_url == "https://wit.example.com"
    wit.close()


def test_from_env_without_token(monkeypatch):
    monkeypatch.delenv("WIT_ACCESS_TOKEN", raising=False)

    with pytest.raises(ValueError, match="WIT_ACCESS_TOKEN"):
        Wit.from_env(use_dotenv=False)
