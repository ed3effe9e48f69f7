"""Test utilities for URL shortener tests."""

import json
import random
import string
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from shortlink.models.link import ShortLinkRecord

BASE_TIME = datetime(2024, 11, 20, 8, 30, tzinfo=timezone.utc)


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_name() -> str:
    """Generate a random valid short name."""
    return f"{random_string(6)}-{random_string(4)}"


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


def create_test_record(
    name: Optional[str] = None,
    target_url: Optional[str] = None,
    visits: int = 0,
) -> ShortLinkRecord:
    """Build a record with ``visits`` entries in its history."""
    record = ShortLinkRecord.create(
        name=name or random_name(),
        target_url=target_url or random_url(),
        base_domain="shortmyurl.us.kg",
        client_ip="203.0.113.7",
        created_at=BASE_TIME,
    )
    for i in range(visits):
        record.record_visit(f"198.51.100.{i}", when=BASE_TIME + timedelta(minutes=i + 1))
    return record


def read_store_file(path: Path) -> Dict[str, Any]:
    """Raw JSON content of a store file."""
    return json.loads(Path(path).read_text(encoding="utf-8"))
