"""Shared type aliases."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

# Address values reported by HttpContext implementations
IPAddress = IPv4Address | IPv6Address
