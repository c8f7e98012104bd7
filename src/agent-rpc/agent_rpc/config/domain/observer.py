"""Observer port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, endpoint: str, uuid: str) -> None: ...

    def config_tls_verification_disabled(self, endpoint: str) -> None: ...
