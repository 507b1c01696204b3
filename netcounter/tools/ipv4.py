"""
IPv4 parsing and CIDR containment.

Every function here answers malformed input with None or False instead of
raising: "is this address in range" has a well-defined negative answer for
text that is not an address at all.
"""

from ipaddress import IPv4Address, ip_address

ALL_ONES = 0xFFFFFFFF


def parse_ipv4(text: str) -> IPv4Address | None:
    """
    Strictly parse dotted-quad IPv4 text.

    Accepts exactly four decimal octets in [0, 255] made of ASCII digits,
    with no sign, whitespace, leading zeros or trailing characters.

    Returns:
        The parsed address, or None if text is not a well-formed IPv4 address
    """
    if not isinstance(text, str):
        return None
    try:
        return IPv4Address(text)
    except ValueError:
        return None


def ipv4_to_int(address: IPv4Address) -> int:
    """Pack the four octets big-endian (first octet most significant)."""
    result = 0
    for octet in address.packed:
        result = (result << 8) | octet
    return result


def prefix_mask(prefix_length: int) -> int:
    """
    Network mask with the top ``prefix_length`` bits set.

    A zero-length prefix masks every bit away, so every address matches.
    """
    if not 0 <= prefix_length <= 32:
        raise ValueError(f"prefix length must be in [0, 32], got {prefix_length}")
    if prefix_length == 0:
        return 0
    return (ALL_ONES << (32 - prefix_length)) & ALL_ONES


def parse_prefix_length(text: str) -> int | None:
    """Parse an unsigned decimal prefix length (optional leading '+'), or None."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > 32:
        return None
    return value


def is_valid_ipv4(ip_str: str) -> bool:
    """True iff the whole string is one well-formed IPv4 address."""
    return parse_ipv4(ip_str) is not None


def is_ip_in_cidr(ip_str: str, cidr_str: str) -> bool:
    """
    Check whether an IPv4 address falls inside a CIDR range.

    The candidate is parsed as a generic IP address first; IPv6 addresses
    are unsupported and give False. Host bits set in the network part of
    the range are ignored, only the masked prefix has to match.

    Examples:
        >>> is_ip_in_cidr("192.168.1.5", "192.168.1.0/24")
        True
        >>> is_ip_in_cidr("10.0.0.1", "0.0.0.0/0")
        True
        >>> is_ip_in_cidr("::1", "::/0")
        False
    """
    if not isinstance(ip_str, str) or not isinstance(cidr_str, str):
        return False
    try:
        candidate = ip_address(ip_str)
    except ValueError:
        return False
    if not isinstance(candidate, IPv4Address):
        return False

    parts = cidr_str.split("/")
    if len(parts) != 2:
        return False

    network = parse_ipv4(parts[0])
    if network is None:
        return False

    prefix_length = parse_prefix_length(parts[1])
    if prefix_length is None:
        return False

    mask = prefix_mask(prefix_length)
    return (ipv4_to_int(candidate) & mask) == (ipv4_to_int(network) & mask)
