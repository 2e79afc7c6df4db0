import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_NAMESPACE = "kvindex"
NAMESPACE_ENV_VAR = "KVINDEX_NAMESPACE"


@dataclass(frozen=True)
class IndexConfig:
    """Settings shared by every index built against one store."""

    """🏷️ Prefix for every table name the library creates"""
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self):
        if not self.namespace:
            raise ValueError("Namespace must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'IndexConfig':
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from; defaults to os.environ

        Returns:
            IndexConfig: Config with the namespace from KVINDEX_NAMESPACE,
            or the default namespace when it is unset or empty
        """
        environ = os.environ if environ is None else environ
        return cls(namespace=environ.get(NAMESPACE_ENV_VAR) or DEFAULT_NAMESPACE)
