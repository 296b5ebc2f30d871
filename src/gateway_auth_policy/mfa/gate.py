"""Second-factor gate combining a network policy with a verifier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import ClientAddressError
from ..network import canonical_address, parse_address
from ..request_context import get_client_ip

if TYPE_CHECKING:
    from ..network import IPAddress
    from ..policy import NetworkPolicy
    from .ports import ISecondFactorVerifier

logger = logging.getLogger(__name__)


class SecondFactorGate:
    """Invoke a second-factor verifier only where the network policy asks for it.

    Example:
        ```python
        config = TotpConfigurationService(environment)
        gate = SecondFactorGate(
            policy=config.get_network_policy(),
            verifier=MyTotpVerifier(config.get_settings()),
        )

        # After primary authentication succeeded
        enforced = await gate.authenticate("alice", "10.1.2.3")
        ```
    """

    def __init__(
        self,
        *,
        policy: NetworkPolicy,
        verifier: ISecondFactorVerifier,
    ) -> None:
        self.policy = policy
        self.verifier = verifier

    def resolve_address(self, client_address: IPAddress | str | None) -> IPAddress:
        """Return the canonical requester address.

        Falls back to the request context when no address is given.

        Raises:
            ClientAddressError: If no address is known or it is not a single IP.
        """
        if client_address is None:
            client_address = get_client_ip()
        if client_address is None:
            raise ClientAddressError("Client address is not available")
        if not isinstance(client_address, str):
            return canonical_address(client_address)
        try:
            return parse_address(client_address)
        except ValueError as exc:
            raise ClientAddressError(
                f"Client address {client_address!r} is not a single IP address"
            ) from exc

    async def authenticate(
        self,
        username: str,
        client_address: IPAddress | str | None = None,
    ) -> bool:
        """Run the second-factor step for an authenticated user.

        Args:
            username: User whose primary credentials were accepted.
            client_address: Requester address; taken from the request
                context when omitted.

        Returns:
            True if the verifier was invoked and succeeded, False if the
            policy skipped the second factor.

        Raises:
            ClientAddressError: If the requester address is unknown or invalid.
            MfaError: Whatever the verifier raises; never swallowed here.
        """
        address = self.resolve_address(client_address)

        if not self.policy.is_second_factor_required(address):
            logger.debug("Skipping second factor for %s from %s", username, address)
            return False

        logger.debug("Requiring second factor for %s from %s", username, address)
        await self.verifier.verify(username, address)
        return True


__all__: list[str] = ["SecondFactorGate"]
