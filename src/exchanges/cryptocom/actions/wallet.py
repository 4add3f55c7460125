from typing import ClassVar, Optional

from .spot_trading import PrivateAction


class CreateWithdrawal(PrivateAction):
    method: ClassVar[str] = "private/create-withdrawal"
    currency: str
    amount: float
    address: str
    client_wid: Optional[str] = None
    address_tag: Optional[str] = None
    network_id: Optional[str] = None


class GetWithdrawalHistory(PrivateAction):
    method: ClassVar[str] = "private/get-withdrawal-history"
    currency: Optional[str] = None
    start_ts: Optional[int] = None
    end_ts: Optional[int] = None
    page_size: Optional[int] = None
    page: Optional[int] = None
    status: Optional[str] = None


class GetDepositAddress(PrivateAction):
    method: ClassVar[str] = "private/get-deposit-address"
    currency: str
