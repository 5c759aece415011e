"""
Device identity helpers.
"""

import uuid
from typing import Optional

from pagekit.error_handling.exceptions import DeviceIdentityError

# uuid.getnode() sets the multicast bit when it had to fall back to a random node
_RANDOM_NODE_BIT = 1 << 40


def format_hardware_address(
    node: int, separator: str = "", upper: bool = False
) -> str:
    """
    Render a 48-bit hardware address as hex octets.

    Args:
        node: Address as an integer
        separator: String placed between octets ("" gives 12 bare digits)
        upper: Use upper-case hex digits

    Returns:
        Formatted address, e.g. ``00-05-9A-3C-78-00``
    """
    if node < 0 or node >= 1 << 48:
        raise ValueError(f"Not a 48-bit hardware address: {node}")

    digits = f"{node:012X}" if upper else f"{node:012x}"
    return separator.join(digits[i:i + 2] for i in range(0, 12, 2))


def get_mac_id(node: Optional[int] = None) -> str:
    """
    Return this device's MAC id: 12 lower-case hex digits, no separators.

    Raises:
        DeviceIdentityError: If no real hardware address is available
    """
    if node is None:
        node = uuid.getnode()

    if node & _RANDOM_NODE_BIT:
        raise DeviceIdentityError(
            "No hardware address available for this device",
            details={"node": f"{node:012x}"},
        )

    return format_hardware_address(node)
