"""MFA ports (protocols) for second-factor verification.

Verification itself (TOTP codes, Duo round trips) lives outside this
package; hosts plug an implementation into the gate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..network import IPAddress


@runtime_checkable
class ISecondFactorVerifier(Protocol):
    """Protocol for second-factor verification services."""

    async def verify(self, username: str, client_address: IPAddress) -> None:
        """Verify the second factor of an already authenticated user.

        Args:
            username: User whose primary credentials were accepted.
            client_address: Canonical requester address.

        Raises:
            MfaRequiredError: The user has not presented a second factor yet.
            MfaInvalidError: The presented second factor is wrong.
        """
        ...


__all__: list[str] = ["ISecondFactorVerifier"]
