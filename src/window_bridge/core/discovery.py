#!/usr/bin/env python3
"""
Port Discovery

Lets several bridge instances run on one machine by picking the first free
port in a small range above a base port.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- find_available_port("127.0.0.1", 9223) with 9223 and 9224 in use

Expected output:
- 9225
"""

import socket

from loguru import logger

from window_bridge.core.constants import DISCOVERY_SETTINGS

MAX_PORT = 65535


def is_port_available(bind_address: str, port: int) -> bool:
    """Check whether a TCP socket can be bound to bind_address:port."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind((bind_address, port))
    except OSError:
        return False
    return True


def find_available_port(
    bind_address: str,
    base_port: int,
    max_attempts: int = DISCOVERY_SETTINGS["MAX_ATTEMPTS"]
) -> int:
    """
    Find the first bindable port in base_port .. base_port + max_attempts - 1.

    Args:
        bind_address: Address to bind to (e.g. "127.0.0.1" or "0.0.0.0")
        base_port: First port to try
        max_attempts: Number of consecutive ports to try

    Returns:
        int: First available port, or base_port if none are free (the caller
        then has to handle the conflict when it binds)
    """
    for offset in range(max_attempts):
        port = base_port + offset
        if port > MAX_PORT:
            break
        if is_port_available(bind_address, port):
            if offset:
                logger.info(f"Port {base_port} in use, using {port} on {bind_address}")
            return port

    logger.warning(
        f"No free port in {base_port}-{min(base_port + max_attempts - 1, MAX_PORT)} on {bind_address}, "
        f"falling back to {base_port}"
    )
    return base_port


if __name__ == "__main__":
    """Validate port discovery against real sockets"""
    import sys

    all_validation_failures = []
    total_tests = 0

    total_tests += 1
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as held:
        held.bind(("127.0.0.1", 0))
        taken = held.getsockname()[1]
        found = find_available_port("127.0.0.1", taken, max_attempts=10)
        if found == taken or not taken < found < taken + 10:
            all_validation_failures.append(f"Busy port test: expected a port above {taken}, got {found}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
