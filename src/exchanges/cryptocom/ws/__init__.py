from .action_router import ActionRouter, CorrelationCounter
from .builder import SessionBuilder
from .classifier import StreamClassifier
from .controller import EventReceiver, SessionCapability, SessionController
from .market_stream import MarketStreamClassifier
from .stream_pump import StreamPump
from .user_stream import UserStreamClassifier

__all__ = [
    'ActionRouter',
    'CorrelationCounter',
    'SessionBuilder',
    'StreamClassifier',
    'EventReceiver',
    'SessionCapability',
    'SessionController',
    'MarketStreamClassifier',
    'StreamPump',
    'UserStreamClassifier',
]
