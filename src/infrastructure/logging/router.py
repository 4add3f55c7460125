from typing import Dict, List

from .interfaces import LogBackend, LogRecord, LogRouter
from .structs import RouterConfig


class SimpleRouter(LogRouter):
    """
    Routes by logger-name prefix, falling back to the default backends.

    The longest matching prefix wins, so ``cryptocom.ws.user`` can be routed
    apart from ``cryptocom``.
    """

    def __init__(self, backends: Dict[str, LogBackend], config: RouterConfig):
        self.backends = backends
        self._rules = sorted((config.routing_rules or {}).items(), key=lambda kv: len(kv[0]), reverse=True)
        self._default = [backends[name] for name in config.get_default_backends() if name in backends]

    def get_backends(self, record: LogRecord) -> List[LogBackend]:
        for prefix, names in self._rules:
            if record.logger_name.startswith(prefix):
                return [self.backends[name] for name in names if name in self.backends]
        return self._default


def create_router(backends: Dict[str, LogBackend], config: RouterConfig) -> SimpleRouter:
    return SimpleRouter(backends, config)
