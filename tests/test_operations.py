"""
Tests for the operation table and the generated client methods.
"""

import json

import pytest

from paylane_client import (
    OPERATIONS,
    Operation,
    RestClient,
    UnknownOperationError,
    find_operation,
)

from .conftest import sent_request

EXPECTED_TABLE = {
    "cardSale": ("cards/sale", "POST"),
    "cardSaleByToken": ("cards/saleByToken", "POST"),
    "cardAuthorization": ("cards/authorization", "POST"),
    "cardAuthorizationByToken": ("cards/authorizationByToken", "POST"),
    "paypalAuthorization": ("paypal/authorization", "POST"),
    "captureAuthorization": ("authorizations/capture", "POST"),
    "closeAuthorization": ("authorizations/close", "POST"),
    "refund": ("refunds", "POST"),
    "getSaleInfo": ("sales/info", "GET"),
    "getAuthorizationInfo": ("authorizations/info", "GET"),
    "checkSaleStatus": ("sales/status", "GET"),
    "directDebitSale": ("directdebits/sale", "POST"),
    "sofortSale": ("sofort/sale", "POST"),
    "idealSale": ("ideal/sale", "POST"),
    "idealBankCodes": ("ideal/bankcodes", "GET"),
    "bankTransferSale": ("banktransfers/sale", "POST"),
    "paypalSale": ("paypal/sale", "POST"),
    "paypalStopRecurring": ("paypal/stopRecurring", "POST"),
    "resaleBySale": ("resales/sale", "POST"),
    "resaleByAuthorization": ("resales/authorization", "POST"),
    "checkCard3DSecure": ("3DSecure/checkCard", "GET"),
    "checkCard3DSecureByToken": ("3DSecure/checkCardByToken", "GET"),
    "saleBy3DSecureAuthorization": ("3DSecure/authSale", "POST"),
    "checkCard": ("cards/check", "GET"),
    "checkCardByToken": ("cards/checkByToken", "GET"),
}


class TestOperationTable:
    """The static table of remote actions."""

    def test_table_matches_remote_api(self):
        assert {op.name: (op.path, op.verb) for op in OPERATIONS} == EXPECTED_TABLE

    def test_method_names(self):
        attributes = {op.name: op.attribute for op in OPERATIONS}
        assert attributes["cardSale"] == "card_sale"
        assert attributes["getSaleInfo"] == "get_sale_info"
        assert attributes["paypalStopRecurring"] == "paypal_stop_recurring"
        assert attributes["checkCard3DSecure"] == "check_card_3d_secure"
        assert attributes["checkCard3DSecureByToken"] == "check_card_3d_secure_by_token"
        assert attributes["saleBy3DSecureAuthorization"] == "sale_by_3d_secure_authorization"
        assert len(set(attributes.values())) == len(OPERATIONS)

    def test_find_by_either_name(self):
        assert find_operation("cardSale") is find_operation("card_sale")

    def test_find_unknown(self):
        with pytest.raises(KeyError):
            find_operation("cardSteal")

    def test_rejects_unsupported_verb(self):
        with pytest.raises(ValueError):
            Operation("patchSale", "sales/patch", "PATCH")

    def test_verb_check_is_case_insensitive(self):
        assert Operation("idealSale", "ideal/sale", "post").verb == "post"


class TestGeneratedMethods:
    """Every table entry is a client method forwarding to ``call``."""

    @pytest.mark.parametrize("operation", OPERATIONS, ids=lambda op: op.name)
    def test_method_forwards_to_call(self, client, session, operation):
        params = {"id_sale": 123, "amount": 10.5}
        getattr(client, operation.attribute)(params)

        method, url, kwargs = sent_request(session)
        assert method == operation.verb
        assert url == "https://sandbox.paylane.test/rest/" + operation.path
        assert json.loads(kwargs["data"]) == params

    def test_card_sale(self, client, session):
        client.card_sale({"amount": 100, "currency": "USD"})
        method, url, kwargs = sent_request(session)
        assert (method, url) == ("POST", "https://sandbox.paylane.test/rest/cards/sale")
        assert kwargs["data"] == b'{"amount":100,"currency":"USD"}'
        assert client.is_success() is True

    def test_ideal_bank_codes_without_params(self, client, session):
        client.ideal_bank_codes()
        method, url, kwargs = sent_request(session)
        assert (method, url) == ("GET", "https://sandbox.paylane.test/rest/ideal/bankcodes")
        assert json.loads(kwargs["data"]) == {}

    def test_generated_method_metadata(self):
        assert RestClient.card_sale.__name__ == "card_sale"
        assert "cards/sale" in RestClient.card_sale.__doc__


class TestInvoke:
    """Dispatch by operation name."""

    def test_invoke_by_remote_name(self, client, session):
        client.invoke("captureAuthorization", {"id_authorization": 7, "amount": 5})
        method, url, _ = sent_request(session)
        assert (method, url) == ("POST", "https://sandbox.paylane.test/rest/authorizations/capture")

    def test_invoke_by_method_name(self, client, session):
        client.invoke("check_sale_status", {"id_sale": 1})
        method, url, _ = sent_request(session)
        assert (method, url) == ("GET", "https://sandbox.paylane.test/rest/sales/status")

    def test_invoke_result(self, client):
        assert client.invoke_result("refund", {"id_sale": 1}).success is True

    def test_invoke_unknown_operation(self, client, session):
        with pytest.raises(UnknownOperationError) as excinfo:
            client.invoke("cardSteal", {})
        assert "cardSteal" in str(excinfo.value)
        assert isinstance(excinfo.value, KeyError)
        session.request.assert_not_called()
