"""Namespace to module-name policies.

A naming policy is any ``Callable[[str], str]``. Policies are plain functions
with no state, so any function with the same signature can be passed to a
partitioner.

Examples (standard policy):
    com.square.customer -> square-customer
    org.mycompany.api   -> mycompany-api
    io.grpc.health.v1   -> grpc-health-v1
"""

from collections.abc import Callable, Sequence

from ..config import DEFAULT_STRIP_PREFIXES, ModularizerConfig
from ..exceptions import InvalidConfigError

NamingPolicy = Callable[[str], str]


def make_standard_naming(
    prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES,
    separator: str = ".",
    joiner: str = "-",
) -> NamingPolicy:
    """Build a policy that strips the first matching prefix, then joins segments.

    Only one prefix is stripped, tried in the given order.
    """
    ordered = tuple(prefixes)

    def namespace_to_module_name(namespace: str) -> str:
        name = namespace
        for prefix in ordered:
            if name.startswith(prefix):
                name = name[len(prefix):]
                break
        return name.replace(separator, joiner)

    return namespace_to_module_name


standard_naming: NamingPolicy = make_standard_naming()


def full_preserving_naming(namespace: str) -> str:
    """Keep the whole namespace: com.square.customer -> com-square-customer."""
    return namespace.replace(".", "-")


def get_naming_policy(name: str, config: ModularizerConfig | None = None) -> NamingPolicy:
    """Resolve a policy by its configuration name ("standard" or "full")."""
    if name == "standard":
        if config is not None and tuple(config.strip_prefixes) != DEFAULT_STRIP_PREFIXES:
            return make_standard_naming(config.strip_prefixes)
        return standard_naming
    if name == "full":
        return full_preserving_naming
    raise InvalidConfigError("naming_policy", name, "expected 'standard' or 'full'")
