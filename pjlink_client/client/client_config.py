# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink client configuration.

Provides the endpoint (host, port, password) and timeout settings for a
PjLinkClient. A configuration is validated when it is created and is not
modified afterwards.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import ConfigurationError
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_PORT,
    MAX_PASSWORD_LENGTH,
  )

class PjLinkClientConfig:
    """PJLink client configuration."""
    host: str
    port: int
    password: str
    timeout_secs: Optional[float]

    def __init__(
            self,
            host: Optional[str]=None,
            password: Optional[str]=None,
            *,
            port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            base_config: Optional[PjLinkClientConfig]=None
          ) -> None:
        """Creates a configuration for a PJLink client.

           Args:
             host: The hostname or IP address of the device.
                   May optionally be prefixed with "tcp://".
                   May be suffixed with ":<port>" to specify a
                   non-default port, which will override the port argument.
                   If None, the host will be taken from the base
                   configuration, or from the PJLINK_HOST environment
                   variable.
             password:
                   The PJLink password, at most 32 ASCII characters.
                   If None, the password will be taken from the base
                   configuration, or from the PJLINK_PASSWORD environment
                   variable. If neither is set, the empty password is
                   used. Devices that require authentication with no
                   password configured accept the empty password.
             port: The TCP/IP port number to use. If None, the port
                   will be taken from the base configuration, or from the
                   PJLINK_PORT environment variable. If that is not found,
                   the default PJLink port (4352) will be used.
             timeout_secs:
                   Timeout for each connect, send and receive step, in
                   seconds. If None, the base configuration or the
                   PJLINK_TIMEOUT environment variable is used; if neither
                   is set there is no timeout.
             base_config:
                   An optional base configuration to use.

           Raises:
             ConfigurationError if the resulting host, port or password is invalid.
        """
        if base_config is None:
            self.init_from_defaults()
        else:
            self.init_from_base_config(base_config)

        if port is not None:
            self.port = port

        if host is not None and host != '':
            self.host = host

        if password is not None:
            self.password = password

        if timeout_secs is not None:
            self.timeout_secs = timeout_secs

        self.host, host_port = self.split_host_port(self.host)
        if host_port is not None:
            self.port = host_port

        self.validate()

    def init_from_defaults(self) -> None:
        """Initializes the configuration from environment variables and defaults."""
        self.host = os.environ.get('PJLINK_HOST', '')
        port_str = os.environ.get('PJLINK_PORT')
        if port_str is None or port_str == '':
            self.port = DEFAULT_PORT
        else:
            self.port = self._parse_port(port_str)
        self.password = os.environ.get('PJLINK_PASSWORD', '')
        timeout_str = os.environ.get('PJLINK_TIMEOUT')
        if timeout_str is None or timeout_str == '':
            self.timeout_secs = DEFAULT_TIMEOUT
        else:
            try:
                self.timeout_secs = float(timeout_str)
            except ValueError as e:
                raise ConfigurationError(f"Invalid timeout: {timeout_str!r}") from e

    def init_from_base_config(self, base_config: PjLinkClientConfig) -> None:
        """Initializes the configuration from a base configuration."""
        self.host = base_config.host
        self.port = base_config.port
        self.password = base_config.password
        self.timeout_secs = base_config.timeout_secs

    @staticmethod
    def _parse_port(port_str: str) -> int:
        try:
            return int(port_str)
        except ValueError as e:
            raise ConfigurationError(f"Invalid port number: {port_str!r}") from e

    @classmethod
    def split_host_port(cls, host: str) -> Tuple[str, Optional[int]]:
        """Strips an optional "tcp://" prefix and ":<port>" suffix from a host string."""
        if '://' in host:
            if not host.startswith('tcp://'):
                raise ConfigurationError(f"Unsupported protocol in host specifier: {host!r}")
            host = host[6:]
        port: Optional[int] = None
        if host.count(':') == 1:
            host, port_str = host.split(':')
            port = cls._parse_port(port_str)
        return host, port

    def validate(self) -> None:
        if self.host == '':
            raise ConfigurationError("Host must not be empty")
        if not (0 < self.port < 65536):
            raise ConfigurationError(f"Port number out of range: {self.port}")
        if len(self.password) > MAX_PASSWORD_LENGTH:
            raise ConfigurationError(f"Password must be {MAX_PASSWORD_LENGTH} or fewer ASCII characters")
        if not self.password.isascii():
            raise ConfigurationError("Password must contain only ASCII characters")
        if self.timeout_secs is not None and self.timeout_secs <= 0:
            raise ConfigurationError(f"Timeout must be positive: {self.timeout_secs}")

    @classmethod
    def from_jsonable(cls, data: JsonableDict, base_config: Optional[PjLinkClientConfig]=None) -> PjLinkClientConfig:
        """Creates a configuration from a JSON-compatible dict with optional keys
           "host", "port", "password" and "timeout_secs"."""
        host = data.get('host')
        password = data.get('password')
        port = data.get('port')
        timeout_secs = data.get('timeout_secs')
        if host is not None and not isinstance(host, str):
            raise ConfigurationError(f"Invalid host in configuration: {host!r}")
        if password is not None and not isinstance(password, str):
            raise ConfigurationError("Invalid password in configuration")
        if port is not None and (isinstance(port, bool) or not isinstance(port, int)):
            raise ConfigurationError(f"Invalid port in configuration: {port!r}")
        if timeout_secs is not None and (isinstance(timeout_secs, bool) or not isinstance(timeout_secs, (int, float))):
            raise ConfigurationError(f"Invalid timeout_secs in configuration: {timeout_secs!r}")
        return cls(
            host=host,
            password=password,
            port=port,
            timeout_secs=None if timeout_secs is None else float(timeout_secs),
            base_config=base_config,
          )

    def to_jsonable(self) -> JsonableDict:
        """Returns a JSON-compatible dict. The password is not included."""
        return dict(
            host=self.host,
            port=self.port,
            timeout_secs=self.timeout_secs,
          )

    def __str__(self) -> str:
        return (
            f"PjLinkClientConfig("
            f"host={self.host}, "
            f"port={self.port}, "
            f"timeout_secs={self.timeout_secs!r})"
          )

    def __repr__(self) -> str:
        return str(self)
