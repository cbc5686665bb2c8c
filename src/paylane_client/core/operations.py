"""
Static table of the remote actions exposed by the PayLane REST API.

Each :class:`Operation` binds a remote action name to a relative path and an
HTTP verb. :class:`paylane_client.core.client.RestClient` turns every entry
into a method named after :attr:`Operation.attribute`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Tuple

__all__ = [
    "ALLOWED_VERBS",
    "OPERATIONS",
    "Operation",
    "find_operation",
    "is_allowed_verb",
]

ALLOWED_VERBS = frozenset({"GET", "PUT", "POST", "DELETE"})

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z0-9])|(?<=[A-Z])(?=[A-Z][a-z])")


def is_allowed_verb(verb: str) -> bool:
    return verb.upper() in ALLOWED_VERBS


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class Operation:
    name: str
    path: str
    verb: str

    def __post_init__(self) -> None:
        if not is_allowed_verb(self.verb):
            raise ValueError(f"Operation {self.name} uses unsupported verb {self.verb}")

    @property
    def attribute(self) -> str:
        """Python method name, e.g. ``checkCard3DSecure`` -> ``check_card_3d_secure``."""
        return _snake_case(self.name)


OPERATIONS: Tuple[Operation, ...] = (
    Operation("cardSale", "cards/sale", "POST"),
    Operation("cardSaleByToken", "cards/saleByToken", "POST"),
    Operation("cardAuthorization", "cards/authorization", "POST"),
    Operation("cardAuthorizationByToken", "cards/authorizationByToken", "POST"),
    Operation("paypalAuthorization", "paypal/authorization", "POST"),
    Operation("captureAuthorization", "authorizations/capture", "POST"),
    Operation("closeAuthorization", "authorizations/close", "POST"),
    Operation("refund", "refunds", "POST"),
    Operation("getSaleInfo", "sales/info", "GET"),
    Operation("getAuthorizationInfo", "authorizations/info", "GET"),
    Operation("checkSaleStatus", "sales/status", "GET"),
    Operation("directDebitSale", "directdebits/sale", "POST"),
    Operation("sofortSale", "sofort/sale", "POST"),
    Operation("idealSale", "ideal/sale", "POST"),
    Operation("idealBankCodes", "ideal/bankcodes", "GET"),
    Operation("bankTransferSale", "banktransfers/sale", "POST"),
    Operation("paypalSale", "paypal/sale", "POST"),
    Operation("paypalStopRecurring", "paypal/stopRecurring", "POST"),
    Operation("resaleBySale", "resales/sale", "POST"),
    Operation("resaleByAuthorization", "resales/authorization", "POST"),
    Operation("checkCard3DSecure", "3DSecure/checkCard", "GET"),
    Operation("checkCard3DSecureByToken", "3DSecure/checkCardByToken", "GET"),
    Operation("saleBy3DSecureAuthorization", "3DSecure/authSale", "POST"),
    Operation("checkCard", "cards/check", "GET"),
    Operation("checkCardByToken", "cards/checkByToken", "GET"),
)

_BY_NAME: Dict[str, Operation] = {}
for _operation in OPERATIONS:
    _BY_NAME[_operation.name] = _operation
    _BY_NAME[_operation.attribute] = _operation


def find_operation(name: str) -> Operation:
    """
    Look up an operation by its remote name (``cardSale``) or method name
    (``card_sale``). Raises :class:`KeyError` for unknown names.
    """
    return _BY_NAME[name]
