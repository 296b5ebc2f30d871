"""Network policy deciding whether a second authentication factor is required.

Two independently configured lists drive the decision:

- **bypass**: requesters inside any listed range skip the second factor.
- **enforce**: only requesters inside a listed range get the second factor.

With neither list configured every requester must complete the second
factor; MFA extensions are opt-out, not opt-in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .network import (
    IPAddress,
    NetworkRange,
    address_matches,
    canonical_address,
    parse_address,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

BOTH_LISTS_WARNING = (
    "Both a bypass list and an enforce list are configured; they are meant "
    "to be alternatives. The enforce list decides for every requester and "
    "the bypass list has no effect."
)


def second_factor_required(
    address: IPAddress,
    bypass: Sequence[NetworkRange],
    enforce: Sequence[NetworkRange],
) -> bool:
    """Decide whether ``address`` must complete a second factor.

    The lists are evaluated in sequence: a bypass match clears the
    requirement, then a non-empty enforce list overrides that outcome with
    its own membership test.

    Args:
        address: The single requester address. IPv4-mapped IPv6 addresses
            are matched as IPv4.
        bypass: Already-validated ranges exempt from the second factor.
        enforce: Already-validated ranges that must complete it.

    Returns:
        True if the second factor is required.
    """
    address = canonical_address(address)
    required = not address_matches(address, bypass)
    if enforce:
        required = address_matches(address, enforce)
    return required


@dataclass(frozen=True)
class NetworkPolicy:
    """Bypass and enforce lists for one authentication module.

    Example:
        ```python
        policy = NetworkPolicy(bypass=(ip_network("10.0.0.0/8"),))
        policy.is_second_factor_required("10.1.2.3")  # False
        policy.is_second_factor_required("192.168.1.1")  # True
        ```
    """

    bypass: tuple[NetworkRange, ...] = ()
    enforce: tuple[NetworkRange, ...] = ()

    @classmethod
    def from_lists(
        cls,
        bypass: Sequence[NetworkRange] | None = None,
        enforce: Sequence[NetworkRange] | None = None,
    ) -> NetworkPolicy:
        """Build a policy from the lists returned by a configuration lookup.

        Args:
            bypass: Ranges exempt from the second factor, or None if unset.
            enforce: Ranges that must complete it, or None if unset.

        Returns:
            A policy holding both lists as tuples.
        """
        return cls(bypass=tuple(bypass or ()), enforce=tuple(enforce or ()))

    def warnings(self) -> list[str]:
        """Return configuration concerns that do not prevent evaluation."""
        if self.bypass and self.enforce:
            return [BOTH_LISTS_WARNING]
        return []

    def is_second_factor_required(self, address: IPAddress | str) -> bool:
        """Evaluate the policy for one requester.

        Raises:
            ValueError: If ``address`` is a string that is not a single IP.
        """
        address = (
            parse_address(address)
            if isinstance(address, str)
            else canonical_address(address)
        )
        required = second_factor_required(address, self.bypass, self.enforce)
        logger.debug(
            "Second factor %s for %s",
            "required" if required else "skipped",
            address,
        )
        return required


__all__: list[str] = [
    "BOTH_LISTS_WARNING",
    "NetworkPolicy",
    "second_factor_required",
]
