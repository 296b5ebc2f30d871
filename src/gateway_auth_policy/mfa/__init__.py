"""MFA module: verifier port and the network-scoped second-factor gate."""

from .gate import SecondFactorGate
from .ports import ISecondFactorVerifier

__all__: list[str] = ["ISecondFactorVerifier", "SecondFactorGate"]
