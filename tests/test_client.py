"""Test the roast endpoint client"""
import asyncio
import json

import httpx
import pytest

from roaster.client import RoastCard, RoastClient, pair_roasts
from roaster.errors import RoastRequestFailed
from roaster.prompts import MISSING_ROAST


def test_pair_roasts_fills_missing_positions():
    cards = pair_roasts(["a", "b", "c"], ["roast a", ""])
    assert cards == [
        RoastCard(index=0, todo="a", roast="roast a"),
        RoastCard(index=1, todo="b", roast=MISSING_ROAST),
        RoastCard(index=2, todo="c", roast=MISSING_ROAST),
    ]
    assert [card.number for card in cards] == [1, 2, 3]


def test_fetch_sends_whole_batch_once():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        todos = json.loads(request.content)["todos"]
        return httpx.Response(200, json={"roasts": [f"roast {t}" for t in todos]})

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    cards = asyncio.run(client.roast_cards(["a", "b"]))

    assert len(requests) == 1
    assert requests[0].url.path == "/api/roast"
    assert [card.roast for card in cards] == ["roast a", "roast b"]


@pytest.mark.parametrize("status", [400, 500])
def test_error_status_raises(status):
    def handler(request):
        return httpx.Response(status, json={"error": "Failed to generate roasts"})

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    with pytest.raises(RoastRequestFailed):
        asyncio.run(client.fetch_roasts(["a"]))


def test_non_json_success_body_raises():
    def handler(request):
        return httpx.Response(200, text="<html>proxy</html>")

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    with pytest.raises(RoastRequestFailed):
        asyncio.run(client.roast_cards(["a"]))


@pytest.mark.parametrize("body", [{"roasts": None}, {"roasts": "a"}, {}, ["a"]])
def test_wrong_shape_success_body_raises(body):
    def handler(request):
        return httpx.Response(200, json=body)

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    with pytest.raises(RoastRequestFailed):
        asyncio.run(client.roast_cards(["a"]))


def test_non_string_roast_entries_become_placeholders():
    def handler(request):
        return httpx.Response(200, json={"roasts": [None, "roast b"]})

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    cards = asyncio.run(client.roast_cards(["a", "b"]))

    assert [card.roast for card in cards] == [MISSING_ROAST, "roast b"]


def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = RoastClient("http://roaster.test", transport=httpx.MockTransport(handler))
    with pytest.raises(RoastRequestFailed):
        asyncio.run(client.fetch_roasts(["a"]))
