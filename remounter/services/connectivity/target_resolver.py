import asyncio
import logging
import socket

from ...config import SMB_PORT
from ...core.exceptions import ResolutionError
from ...models import Endpoint, Target


class TargetResolver:
    """Resolves the monitored hostname into a single endpoint, once."""

    async def resolve(self, hostname: str, port: int = SMB_PORT) -> Target:
        """
        Resolve hostname:port and keep the first address returned.

        :raises ResolutionError: if the name cannot be resolved to any address
        """
        if not hostname or not hostname.strip():
            raise ResolutionError(hostname, "hostname is empty")

        loop = asyncio.get_running_loop()
        try:
            infos = await loop.getaddrinfo(hostname, port, type=socket.SOCK_STREAM)
        except (socket.gaierror, UnicodeError) as e:
            raise ResolutionError(hostname, str(e)) from e

        if not infos:
            raise ResolutionError(hostname)

        # sockaddr is (address, port) for IPv4 and (address, port, flow, scope) for IPv6
        _family, _type, _proto, _canonname, sockaddr = infos[0]
        endpoint = Endpoint(address=sockaddr[0], port=sockaddr[1])
        if len(sockaddr) == 4:
            endpoint = Endpoint(
                address=sockaddr[0], port=sockaddr[1], flowinfo=sockaddr[2], scope_id=sockaddr[3]
            )
        logging.debug(f"Resolved {hostname} to {endpoint}")
        return Target(hostname=hostname, endpoint=endpoint)
