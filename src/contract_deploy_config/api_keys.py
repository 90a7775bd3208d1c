"""Block explorer API key registry for contract-deploy-config library."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .exceptions import AmbiguousApiKeyError, UnknownApiKeyAlternativeError


class ApiKeyRegistry:
    """
    Immutable mapping of explorer service name to API key.

    Some services carry several named candidate keys. Those resolve only
    after an explicit `select()`; until then looking them up raises
    AmbiguousApiKeyError.
    """

    def __init__(
        self,
        keys: Mapping[str, str],
        alternatives: Optional[Mapping[str, Mapping[str, str]]] = None,
        selected: Optional[Mapping[str, str]] = None,
    ):
        self._keys = MappingProxyType(dict(keys))
        self._alternatives = MappingProxyType(
            {service: MappingProxyType(dict(options)) for service, options in (alternatives or {}).items()}
        )
        self._selected: Dict[str, str] = {}

        for service, alternative in (selected or {}).items():
            self._check_alternative(service, alternative)
            self._selected[service] = alternative

    def _check_alternative(self, service: str, alternative: str) -> None:
        if service not in self._alternatives:
            raise UnknownApiKeyAlternativeError(
                f"Service '{service}' has no key alternatives"
            )
        if alternative not in self._alternatives[service]:
            raise UnknownApiKeyAlternativeError(
                f"Unknown alternative '{alternative}' for service '{service}'. "
                f"Choose one of: {', '.join(self._alternatives[service])}"
            )

    def services(self) -> List[str]:
        """List all known service names."""
        return list(self._keys) + [s for s in self._alternatives if s not in self._keys]

    def alternatives(self, service: str) -> Dict[str, str]:
        """
        Get the named candidate keys for a service.

        Returns:
            Mapping of alternative name to key (empty for single-key services)
        """
        return dict(self._alternatives.get(service, {}))

    def unresolved(self) -> List[str]:
        """List services whose key still needs an explicit selection."""
        return [s for s in self._alternatives if s not in self._selected]

    def select(self, service: str, alternative: str) -> "ApiKeyRegistry":
        """
        Return a new registry with `alternative` chosen for `service`.

        Raises:
            UnknownApiKeyAlternativeError: If service or alternative is unknown
        """
        selected = dict(self._selected)
        selected[service] = alternative
        return ApiKeyRegistry(self._keys, self._alternatives, selected)

    def get(self, service: str) -> str:
        """
        Get the API key for a service.

        Raises:
            AmbiguousApiKeyError: If the service has unselected alternatives
            KeyError: If the service is unknown
        """
        if service in self._alternatives:
            if service not in self._selected:
                raise AmbiguousApiKeyError(
                    f"Service '{service}' has several candidate keys "
                    f"({', '.join(self._alternatives[service])}); select one explicitly"
                )
            return self._alternatives[service][self._selected[service]]
        return self._keys[service]

    def __contains__(self, service: object) -> bool:
        return service in self._keys or service in self._alternatives

    def as_dict(self) -> Dict[str, str]:
        """
        Export every service key.

        Raises:
            AmbiguousApiKeyError: If any service is still unresolved
        """
        return {service: self.get(service) for service in self.services()}

    def __repr__(self) -> str:
        return f"ApiKeyRegistry(services={self.services()!r}, unresolved={self.unresolved()!r})"
