"""
Wallet management records (withdrawals, deposits, networks).
"""

from typing import Dict, List, Optional

import msgspec


class CreateWithdrawalResult(msgspec.Struct, frozen=True):
    id: int
    currency: str
    amount: float
    fee: float
    create_time: int
    client_wid: Optional[str] = None
    address: Optional[str] = None


class WithdrawalItem(msgspec.Struct, frozen=True):
    id: int
    currency: str
    amount: float
    fee: float
    create_time: int
    status: str
    txid: str
    client_wid: Optional[str] = None
    address: Optional[str] = None
    network_id: Optional[str] = None


class WithdrawalHistory(msgspec.Struct, frozen=True):
    withdrawal_list: List[WithdrawalItem]


class DepositAddressItem(msgspec.Struct, frozen=True):
    id: int
    currency: str
    network: str
    create_time: int
    status: str
    address: Optional[str] = None


class DepositAddress(msgspec.Struct, frozen=True):
    deposit_address_list: List[DepositAddressItem]


class DepositHistoryItem(msgspec.Struct, frozen=True):
    id: int
    currency: str
    amount: float
    fee: float
    address: str
    create_time: int
    status: str


class DepositHistory(msgspec.Struct, frozen=True):
    deposit_list: List[DepositHistoryItem]


class CurrencyNetwork(msgspec.Struct, frozen=True):
    network_id: str
    withdrawal_enabled: bool
    deposit_enabled: bool
    min_withdrawal_amount: float
    confirmation_required: int
    withdrawal_fee: Optional[float] = None


class CurrencyMap(msgspec.Struct, frozen=True):
    full_name: str
    default_network: str
    network_list: List[CurrencyNetwork]


class CurrencyNetworks(msgspec.Struct, frozen=True):
    update_time: int
    currency_map: Dict[str, CurrencyMap]
