"""Settings that influence behaviour beyond what the WebRTC API exposes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Iterable, List, Optional


class PortRangeError(ValueError):
    """Raised when an ephemeral port range is invalid."""

    def __init__(self, message: str = "invalid port") -> None:
        super().__init__(message)


@dataclass
class EphemeralUDP:
    """Pool of ephemeral UDP ports ICE may allocate from (0 means unset)."""

    port_min: int = 0
    port_max: int = 0


@dataclass
class Detach:
    """Detaching options."""

    data_channels: bool = False


@dataclass
class Timeouts:
    """ICE timers; ``None`` leaves the agent's default in place."""

    ice_connection: Optional[timedelta] = None
    ice_keepalive: Optional[timedelta] = None
    ice_candidate_selection_timeout: Optional[timedelta] = None
    ice_host_acceptance_min_wait: Optional[timedelta] = None
    ice_srflx_acceptance_min_wait: Optional[timedelta] = None
    ice_prflx_acceptance_min_wait: Optional[timedelta] = None
    ice_relay_acceptance_min_wait: Optional[timedelta] = None


@dataclass
class Candidates:
    """Candidate gathering options."""

    ice_trickle: bool = False
    ice_network_types: List[Any] = field(default_factory=list)


@dataclass
class SettingEngine:
    """Knobs that influence behaviour in ways the WebRTC API does not."""

    ephemeral_udp: EphemeralUDP = field(default_factory=EphemeralUDP)
    detach: Detach = field(default_factory=Detach)
    timeout: Timeouts = field(default_factory=Timeouts)
    candidates: Candidates = field(default_factory=Candidates)
    logger_factory: Any = None

    def detach_data_channels(self) -> None:
        """Require data channels to be detached in their open callback."""
        self.detach.data_channels = True

    def set_connection_timeout(
        self, connection_timeout: timedelta, keep_alive: timedelta
    ) -> None:
        """Set the silence allowed on a candidate pair and the keepalive interval."""
        self.timeout.ice_connection = connection_timeout
        self.timeout.ice_keepalive = keep_alive

    def set_candidate_selection_timeout(self, timeout: timedelta) -> None:
        """Set the maximum candidate selection timeout."""
        self.timeout.ice_candidate_selection_timeout = timeout

    def set_host_acceptance_min_wait(self, timeout: timedelta) -> None:
        """Set the minimum wait before accepting a host candidate."""
        self.timeout.ice_host_acceptance_min_wait = timeout

    def set_srflx_acceptance_min_wait(self, timeout: timedelta) -> None:
        """Set the minimum wait before accepting a server reflexive candidate."""
        self.timeout.ice_srflx_acceptance_min_wait = timeout

    def set_prflx_acceptance_min_wait(self, timeout: timedelta) -> None:
        """Set the minimum wait before accepting a peer reflexive candidate."""
        self.timeout.ice_prflx_acceptance_min_wait = timeout

    def set_relay_acceptance_min_wait(self, timeout: timedelta) -> None:
        """Set the minimum wait before accepting a relay candidate."""
        self.timeout.ice_relay_acceptance_min_wait = timeout

    def set_ephemeral_udp_port_range(self, port_min: int, port_max: int) -> None:
        """Limit the ephemeral ports ICE UDP connections allocate from.

        Raises PortRangeError when the range is empty or not 16-bit.
        """
        for port in (port_min, port_max):
            if not 0 <= port <= 0xFFFF:
                raise PortRangeError(f"port {port} is not a 16-bit value")
        if port_max < port_min:
            raise PortRangeError()
        self.ephemeral_udp.port_min = port_min
        self.ephemeral_udp.port_max = port_max

    def set_trickle(self, trickle: bool) -> None:
        """Choose between trickle and synchronous candidate gathering."""
        self.candidates.ice_trickle = trickle

    def set_network_types(self, candidate_types: Iterable[Any]) -> None:
        """Set the candidate network types used while gathering."""
        self.candidates.ice_network_types = list(candidate_types)