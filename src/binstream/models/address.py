from __future__ import annotations
import ipaddress
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

class Address(BaseModel):
    """
    Network endpoint as carried on the wire: IP literal, port and, optionally,
    the IP version byte. When version is omitted it is taken from the host.
    """
    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(..., ge=0, le=65535)
    version: int | None = None

    @field_validator("host")
    @classmethod
    def _ip_literal(cls, v: str) -> str:
        try:
            return str(ipaddress.ip_address(v))
        except ValueError as e:
            raise ValueError(f"not an IP address: {v!r}") from e

    @model_validator(mode="after")
    def _version_matches_host(self) -> "Address":
        if self.version is not None and self.version != ipaddress.ip_address(self.host).version:
            raise ValueError(f"version {self.version} does not match host {self.host}")
        return self

    @property
    def packed(self) -> bytes:
        return ipaddress.ip_address(self.host).packed

    @property
    def ip_version(self) -> int:
        """Explicit version if set, else derived from the packed address length."""
        if self.version is not None:
            return self.version
        return 4 if len(self.packed) == 4 else 6

    def __str__(self) -> str:
        if self.ip_version == 6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
