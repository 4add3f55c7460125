from .base import Action, ActionRecord, FrameSender
from .market import Subscribe, Unsubscribe, GetInstruments, Auth
from .spot_trading import (
    PrivateAction,
    GetAccountSummary,
    CreateOrder,
    CancelOrder,
    CreateOrderList,
    CancelOrderList,
    CancelAllOrders,
    Paginated,
    GetOrderHistory,
    GetTrades,
    GetOpenOrders,
    GetOrderDetail,
    SetCancelOnDisconnect,
    GetCancelOnDisconnect,
)
from .wallet import CreateWithdrawal, GetWithdrawalHistory, GetDepositAddress

__all__ = [
    'Action', 'ActionRecord', 'FrameSender',
    'Subscribe', 'Unsubscribe', 'GetInstruments', 'Auth',
    'PrivateAction',
    'GetAccountSummary', 'CreateOrder', 'CancelOrder', 'CreateOrderList', 'CancelOrderList',
    'CancelAllOrders', 'Paginated', 'GetOrderHistory', 'GetTrades', 'GetOpenOrders',
    'GetOrderDetail', 'SetCancelOnDisconnect', 'GetCancelOnDisconnect',
    'CreateWithdrawal', 'GetWithdrawalHistory', 'GetDepositAddress',
]
