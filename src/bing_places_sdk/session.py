from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig, Environment, parse_bool
from .exceptions import InvalidIdentityError
from .models import Identity
from .validation import validate_identity

logger = logging.getLogger(__name__)


@dataclass
class PlacesSession:
    """Identity and target environment shared by every call of one client.

    The session has a single writer (its client) and no locking: a call reads
    ``identity`` and ``base_url`` once, when its envelope is built, so a switch
    made while calls are in flight only affects calls built afterwards.
    """

    identity: Identity
    environment: Environment = Environment.PRODUCTION
    config: ClientConfig = field(default_factory=ClientConfig)
    identity_header: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self._refresh_identity_header()

    @classmethod
    def create(
        cls,
        identity: Identity | Mapping[str, Any] | None,
        use_sandbox: object = None,
        config: ClientConfig | None = None,
    ) -> "PlacesSession":
        config = config or ClientConfig()
        validated = validate_identity(identity)
        return cls(identity=validated, environment=_resolve_environment(use_sandbox, config), config=config)

    @property
    def base_url(self) -> str:
        return self.config.base_url_for(self.environment)

    def get_identity(self) -> Identity:
        return self.identity.model_copy(deep=True)

    def set_identity(self, identity: Identity | Mapping[str, Any]) -> None:
        # Shape only; the construction checks (empty fields, email syntax) are not repeated.
        if isinstance(identity, Identity):
            self.identity = identity.model_copy(deep=True)
        else:
            try:
                self.identity = Identity.model_validate(dict(identity))
            except PydanticValidationError as exc:
                fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
                raise InvalidIdentityError(f"Identity is required. Missing or invalid fields: {fields}") from exc
        self._refresh_identity_header()

    def switch_to_sandbox(self) -> None:
        self.environment = Environment.SANDBOX

    def switch_to_production(self) -> None:
        self.environment = Environment.PRODUCTION

    def is_sandbox(self) -> bool:
        return self.environment is Environment.SANDBOX

    def is_production(self) -> bool:
        return not self.is_sandbox()

    def _refresh_identity_header(self) -> None:
        self.identity_header = json.dumps(self.identity.to_wire())


def _resolve_environment(use_sandbox: object, config: ClientConfig) -> Environment:
    if use_sandbox is None:
        return config.environment
    parsed = parse_bool(use_sandbox)
    if parsed is None:
        logger.warning("BingPlacesClient: useSandbox not set. Defaulting to production.")
        return Environment.PRODUCTION
    return Environment.SANDBOX if parsed else Environment.PRODUCTION
