"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, endpoint: str, uuid: str) -> None:
        self._log.info("config.loaded", endpoint=endpoint, uuid=uuid)

    def config_tls_verification_disabled(self, endpoint: str) -> None:
        self._log.warning(
            "config.tls_verification_disabled",
            endpoint=endpoint,
            message="Agent certificate will not be verified",
        )
