"""Request transport: URL/auth/header building, parameter placement, response handling."""

import base64
import json
from typing import List

import httpx
import pytest
from pydantic import BaseModel

from bhojpur_subscription import (
    API_VERSION,
    ErrorCode,
    ErrorType,
    NullableStr,
    SubscriptionAPIError,
    SubscriptionClient,
    SubscriptionConfig,
    SubscriptionConfigError,
    SubscriptionDecodeError,
    SubscriptionTransportError,
    encode_params,
)
from bhojpur_subscription.client import decode
from bhojpur_subscription.models import Charge, Coupon
from bhojpur_subscription.resources import ChargesAPI

from .conftest import CHARGE_JSON, TEST_KEY, Recorder, form


class _Thing(BaseModel):
    id: str
    note: NullableStr = ""


def test_client_requires_api_key(monkeypatch):
    monkeypatch.setenv("BHOJPUR_API_KEY", "placeholder")
    monkeypatch.delenv("BHOJPUR_API_KEY")
    with pytest.raises(SubscriptionConfigError):
        SubscriptionClient(SubscriptionConfig(api_key="", base_url="https://api.test.local"))


def test_get_puts_params_in_query_string(make_client):
    rec = Recorder(body={"id": "x"})
    client = make_client(rec)

    raw = client.execute("GET", "/v1/charges", [("count", "10"), ("offset", "0"), ("customer", "cus 1")])

    assert raw.status_code == 200
    req = rec.last
    assert req.method == "GET"
    assert req.url.path == "/v1/charges"
    assert list(req.url.params.multi_items()) == [("count", "10"), ("offset", "0"), ("customer", "cus 1")]
    assert req.content == b""


def test_post_puts_params_in_body(make_client):
    rec = Recorder(body={"id": "x"})
    client = make_client(rec)

    client.execute("POST", "/v1/charges", [("amount", "300"), ("currency", "inr"), ("description", "Litti Chokha")])

    req = rec.last
    assert req.method == "POST"
    assert req.url.query == b""
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert form(req) == [("amount", "300"), ("currency", "inr"), ("description", "Litti Chokha")]


def test_delete_sends_params_in_body(make_client):
    rec = Recorder(body={"id": "x"})
    client = make_client(rec)

    client.execute("delete", "/v1/customers/cus_1/subscription", [("at_period_end", "true")])

    assert rec.last.method == "DELETE"
    assert rec.last.url.query == b""
    assert form(rec.last) == [("at_period_end", "true")]


def test_repeated_keys_keep_order():
    assert encode_params([("a", "1"), ("b", "2"), ("a", "3")]) == "a=1&b=2&a=3"
    assert encode_params({"card[number]": "4242"}) == "card%5Bnumber%5D=4242"
    assert encode_params(None) == ""


def test_version_header_and_basic_auth(make_client):
    rec = Recorder(body={})
    client = make_client(rec)

    client.execute("GET", "/v1/plans")

    req = rec.last
    assert req.headers["Bhojpur-Version"] == API_VERSION
    expected = base64.b64encode(f"{TEST_KEY}:".encode()).decode()
    assert req.headers["Authorization"] == f"Basic {expected}"
    assert req.url.host == "api.test.local"


def test_base_url_override_is_used(make_client):
    rec = Recorder(body={})
    client = make_client(rec, base_url="http://localhost:8080/")

    client.execute("GET", "v1/tokens/tok_1")

    assert rec.last.url.scheme == "http"
    assert rec.last.url.port == 8080
    assert rec.last.url.path == "/v1/tokens/tok_1"


def test_success_decodes_into_target(make_client):
    client = make_client(Recorder(body=CHARGE_JSON))

    charge = client.request("GET", "/v1/charges/ch_1", None, Charge)

    assert isinstance(charge, Charge)
    assert charge.id == "ch_1"
    assert charge.description == ""
    assert charge.customer == ""
    assert charge.fee_details == []
    assert charge.card.name == ""
    assert charge.card.country == "IN"


def test_success_with_nullable_fields_in_small_model(make_client):
    client = make_client(Recorder(body={"id": "t1", "note": None, "extra": 1}))
    thing = client.get("/v1/things/t1", result_type=_Thing)
    assert thing.note == ""


def test_list_targets_are_supported(make_client):
    client = make_client(Recorder(body=[{"id": "a"}, {"id": "b", "note": "n"}]))
    things = client.get("/v1/things", result_type=List[_Thing])
    assert [t.id for t in things] == ["a", "b"]


def test_malformed_success_body_is_decode_error(make_client):
    client = make_client(Recorder(body=b"{not json"))
    with pytest.raises(SubscriptionDecodeError) as exc:
        client.get("/v1/things/t1", result_type=_Thing)
    assert exc.value.body == b"{not json"


def test_shape_mismatch_is_decode_error(make_client):
    bad = dict(CHARGE_JSON, paid=None)  # `paid` is not nullable
    client = make_client(Recorder(body=bad))
    with pytest.raises(SubscriptionDecodeError):
        client.get("/v1/charges/ch_1", result_type=Charge)


def test_non_200_raises_api_error(make_client):
    body = {"error": {"type": "card_error", "code": "card_declined", "message": "Your card was declined."}}
    client = make_client(Recorder(status=402, body=body, headers={"Request-Id": "req_9"}))

    with pytest.raises(SubscriptionAPIError) as exc:
        client.post("/v1/charges", [("amount", "300")], Charge)

    err = exc.value
    assert err.status == 402
    assert err.type is ErrorType.CARD_ERROR
    assert err.code is ErrorCode.CARD_DECLINED
    assert err.request_id == "req_9"


@pytest.mark.parametrize("status,body", [(500, b""), (400, b"oops"), (201, b'{"id": "x"}'), (404, b"null")])
def test_any_non_200_is_an_error_even_with_bad_body(make_client, status, body):
    client = make_client(Recorder(status=status, body=body))
    with pytest.raises(SubscriptionAPIError) as exc:
        client.get("/v1/things/x", result_type=_Thing)
    assert exc.value.status == status


def test_execute_does_not_raise_on_status(make_client):
    client = make_client(Recorder(status=404, body=b"missing"))
    raw = client.execute("GET", "/v1/things/x")
    assert raw.status_code == 404
    assert raw.content == b"missing"
    assert not raw.ok


def test_network_failure_is_transport_error(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(SubscriptionTransportError) as exc:
        client.get("/v1/plans")
    assert isinstance(exc.value.__cause__, httpx.ConnectError)
    assert TEST_KEY not in str(exc.value.url)


def test_network_failure_is_not_retried(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)
    with pytest.raises(SubscriptionTransportError):
        client.get("/v1/plans")
    assert len(calls) == 1


def test_per_call_timeout(make_client):
    rec = Recorder(body={})
    client = make_client(rec)

    client.execute("GET", "/v1/plans", timeout=2.5)
    assert rec.last.extensions["timeout"]["read"] == 2.5

    client.execute("GET", "/v1/plans")
    assert rec.last.extensions["timeout"]["read"] == 30.0


def test_diagnostic_mode_prints_traffic_without_key(make_client, capsys):
    client = make_client(Recorder(body={"id": "x"}), debug=True)

    client.execute("GET", "/v1/charges", [("count", "1")])

    out = capsys.readouterr().out
    assert "REQUEST: GET" in out
    assert "/v1/charges?count=1" in out
    assert "RESPONSE: 200" in out
    assert '{"id": "x"}' in out
    assert TEST_KEY not in out


def test_quiet_by_default(make_client, capsys):
    client = make_client(Recorder(body={}))
    client.execute("GET", "/v1/plans")
    assert "REQUEST" not in capsys.readouterr().out


def test_context_manager_closes(config):
    with SubscriptionClient(config, transport=httpx.MockTransport(Recorder(body={}))) as client:
        client.execute("GET", "/v1/plans")
    assert client._client.is_closed


def test_decode_error_names_field_and_raw_value():
    body = b'{"id": "c", "duration": "once", "percent_off": 5, "duration_in_months": "abc", "livemode": false}'
    with pytest.raises(SubscriptionDecodeError) as exc:
        decode(body, Coupon)
    assert "duration_in_months" in str(exc.value)
    assert "'abc'" in str(exc.value)
    assert exc.value.target == "Coupon"


def test_nested_decode_error_has_dotted_path():
    bad = dict(CHARGE_JSON, card=dict(CHARGE_JSON["card"], name=7))
    with pytest.raises(SubscriptionDecodeError) as exc:
        decode(json.dumps(bad).encode(), Charge)
    assert "card.name=7" in str(exc.value)


def test_resource_and_error_traces_follow_client_debug(make_client, capsys):
    rec = Recorder(body=CHARGE_JSON)
    client = make_client(rec, debug=True)

    ChargesAPI(client).retrieve("ch_1")
    assert "charges.retrieve():" in capsys.readouterr().out

    rec.status = 402
    rec.body = {"error": {"type": "card_error", "code": "card_declined", "message": "declined"}}
    with pytest.raises(SubscriptionAPIError):
        ChargesAPI(client).retrieve("ch_1")
    out = capsys.readouterr().out
    assert "API error:" in out
    assert "card_declined" in out


def test_resource_traces_quiet_without_debug(make_client, capsys):
    ChargesAPI(make_client(Recorder(body=CHARGE_JSON))).retrieve("ch_1")
    assert "charges.retrieve()" not in capsys.readouterr().out
