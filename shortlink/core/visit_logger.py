"""Visit event logging using a bound Loguru logger."""

from typing import Optional

from loguru import logger

visit_logger = logger.bind(event_type="visit")


def log_visit(name: str, ip_address: Optional[str], target_url: str) -> None:
    """
    Log a redirect through a short link.

    Args:
        name: The short name that was visited
        ip_address: The client's IP address, if known
        target_url: Where the visitor was sent
    """
    visit_logger.bind(
        ip=ip_address or "unknown",
        name=name,
    ).info(f"Redirected to {target_url}")
