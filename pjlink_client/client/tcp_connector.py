# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink TCP/IP client connector.

Provides a connector that creates a TcpPjLinkSession per call.
"""

from __future__ import annotations

from ..internal_types import *
from .connector import PjLinkConnector
from .session import PjLinkSession
from .client_config import PjLinkClientConfig

from .tcp_session import TcpPjLinkSession

class TcpPjLinkConnector(PjLinkConnector):
    """PJLink TCP/IP client session connector."""

    config: PjLinkClientConfig

    def __init__(
            self,
            host: Optional[str]=None,
            password: Optional[str]=None,
            port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            config: Optional[PjLinkClientConfig]=None,
          ) -> None:
        """Creates a connector that can create sessions to
           a PJLink device that is reachable over TCP/IP.

              Args:
                host: The hostname or IP address of the device. See
                      PjLinkClientConfig.
                password:
                      The PJLink password. See PjLinkClientConfig.
                port: The TCP/IP port number to use. See PjLinkClientConfig.
                timeout_secs: The timeout for each connect, send and
                        receive step. See PjLinkClientConfig.
                config: A PjLinkClientConfig object that specifies
                        the default host, port, password, etc to use.
                        If None, a default config will be created.
        """
        super().__init__()
        self.config = PjLinkClientConfig(
            host=host,
            port=port,
            timeout_secs=timeout_secs,
            password=password,
            base_config=config
          )

    # @abstractmethod
    async def connect(self) -> PjLinkSession:
        """Create and initialize (including greeting handshake) a TCP/IP
           session for the device associated with this connector.
        """
        session = await TcpPjLinkSession.create(
            self.config.host,
            password=self.config.password,
            port=self.config.port,
            timeout_secs=self.config.timeout_secs
          )
        return session

    def __str__(self) -> str:
        return f"TcpPjLinkConnector(host='{self.config.host}', port={self.config.port})"

    def __repr__(self) -> str:
        return str(self)
