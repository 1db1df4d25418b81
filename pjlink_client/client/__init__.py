# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink client.

Provides a client for PJLink Class 1 devices on TCP/IP.
"""

from .session import PjLinkSession
from .tcp_session import TcpPjLinkSession
from .connector import PjLinkConnector
from .tcp_connector import TcpPjLinkConnector
from .client_config import PjLinkClientConfig
from .client_impl import (
    PjLinkClient,
  )
